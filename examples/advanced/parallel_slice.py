"""Free-threading safe: slice one shared buffer from many threads."""

from concurrent.futures import ThreadPoolExecutor

from utf8_slice import TextView

corpus = TextView.from_str("日本語のテキスト 🚀 " * 10_000)
n = corpus.char_len()

with ThreadPoolExecutor(max_workers=8) as ex:
    windows = list(ex.map(lambda k: corpus.slice(k, k + 12), range(0, n, 997)))

print(f"Sliced {len(windows)} windows in parallel")
print("First window:", windows[0])
print("All share storage:", all(w.obj is corpus.obj for w in windows))
