"""Character, string, text, memory and linked-list helpers."""