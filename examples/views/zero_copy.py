"""Views borrow the caller's storage; slicing never copies."""

from utf8_slice import TextView, profiled_scan

data = "aé日🎉, mixed widths".encode()
view = TextView(data)

middle = view[1:3]
print(repr(middle), "bytes:", len(middle), "chars:", middle.char_len())
print("shares storage:", middle.obj is data)

for char in view.till(4).chars():
    print(f"{str(char)!r:8} {char.nbytes} byte(s)")

with profiled_scan() as metrics:
    view.slice(2, 4)
print(metrics.summary())
