"""Character, conversion, memory, string and output helpers."""