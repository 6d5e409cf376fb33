"""Transform 1000 independent documents in parallel and dump one as JSON."""

from kbdplus import Element, Root, Text, apply_kbd_many, to_json

docs = [
    Root(children=(Element("paragraph", (Text(f"Doc {i}: press ++F{i % 12 + 1}++"),)),))
    for i in range(1000)
]

results = apply_kbd_many(docs, max_workers=8)

print(f"Transformed {len(results)} documents in parallel")
print(to_json(results[0], indent=2))
