"""Benchmark offset resolution and slicing.

Compares a range slice (end resolved first, begin within the prefix) against
resolving both offsets over the whole buffer, and measures char_len across
character widths.

Run with:
    pytest benchmarks/benchmark_slicing.py -v --benchmark-only
"""

try:
    import pytest

    from utf8_slice import char_len, from_, resolve, slice, till

    @pytest.mark.benchmark(group="range-slice")
    def test_benchmark_slice(benchmark, mixed_document):
        """Range slice near the end of a large document."""
        n = char_len(mixed_document)

        benchmark(slice, mixed_document, n - 200, n - 100)

    @pytest.mark.benchmark(group="range-slice")
    def test_benchmark_two_independent_resolves(benchmark, mixed_document):
        """Baseline: both offsets resolved over the full buffer."""
        n = char_len(mixed_document)

        def independent():
            start = resolve(mixed_document, n - 200)
            stop = resolve(mixed_document, n - 100)
            return memoryview(mixed_document)[start:stop]

        benchmark(independent)

    @pytest.mark.benchmark(group="prefix-suffix")
    def test_benchmark_till(benchmark, mixed_document):
        benchmark(till, mixed_document, 10_000)

    @pytest.mark.benchmark(group="prefix-suffix")
    def test_benchmark_from(benchmark, mixed_document):
        benchmark(from_, mixed_document, 10_000)

    @pytest.mark.benchmark(group="char-len")
    def test_benchmark_char_len_ascii(benchmark, ascii_document):
        benchmark(char_len, ascii_document)

    @pytest.mark.benchmark(group="char-len")
    def test_benchmark_char_len_cjk(benchmark, cjk_document):
        benchmark(char_len, cjk_document)

    @pytest.mark.benchmark(group="char-len")
    def test_benchmark_decode_len_baseline(benchmark, cjk_document):
        """Baseline: decode to str and take len (allocates)."""
        benchmark(lambda: len(cjk_document.decode()))

except ImportError:
    pass  # pytest not available
