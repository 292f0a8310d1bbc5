"""Slice UTF-8 bytes by character, not by byte."""

import utf8_slice

s = "The 🚀 goes to the 🌑!".encode()

print(utf8_slice.slice(s, 4, 5))  # 🚀
print(utf8_slice.from_(s, 4))  # 🚀 goes to the 🌑!
print(utf8_slice.till(s, 4))  # The
print(utf8_slice.len(s), "characters,", len(s), "bytes")
