"""Benchmark Lexis tokenization and stream traversal.

Run with:
    pytest benchmarks/benchmark_tokenize.py -v --benchmark-only
"""

import pytest


@pytest.mark.benchmark(group="tokenize")
def test_benchmark_tokenize_small(benchmark, scanner, small_source):
    """Tokenize a short statement (pattern already compiled)."""
    scanner.tokenize(small_source)
    benchmark(scanner.tokenize, small_source)


@pytest.mark.benchmark(group="tokenize")
def test_benchmark_tokenize_large(benchmark, scanner, large_source):
    """Tokenize a ~100KB source."""
    stream = benchmark(scanner.tokenize, large_source)
    assert len(stream) > 20000


@pytest.mark.benchmark(group="stream")
def test_benchmark_walk_stream(benchmark, scanner, large_source):
    """Walk every token with read()/next(), the typical parser loop."""
    stream = scanner.tokenize(large_source)

    def walk():
        stream.reset()
        count = 0
        while stream.read() is not None:
            count += 1
            if not stream.next():
                break
        return count

    assert benchmark(walk) == len(stream)


@pytest.mark.benchmark(group="stream")
def test_benchmark_where_token(benchmark, scanner, large_source):
    """Resolve line/column for the last token of a large source."""
    stream = scanner.tokenize(large_source)
    last = stream[-1]
    assert benchmark(stream.context.where_token, last)[0] == 4000
