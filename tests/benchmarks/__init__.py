"""Benchmarks package – uses pytest-benchmark.

Benchmark modules are named ``bench_*.py``; run them explicitly::

    pytest tests/benchmarks/ -v --benchmark-sort=median

To run them as plain functional tests without timing overhead::

    pytest tests/benchmarks/ --benchmark-disable
"""
