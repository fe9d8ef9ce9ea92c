from hastdeco.hast import find_code, line_elements, stringify
from hastdeco.models import DecorationItem, SourcePosition
from hastdeco.pipeline import decorate_code

if __name__ == "__main__":
    code = (
        "def greet(name):\n"
        "    message = 'hello ' + name\n"
        "    return message"
    )

    decorations = [
        DecorationItem(start=4, end=9, tag_name="mark", properties={"class": ["fn-name"]}),
        DecorationItem(
            start=SourcePosition(1, 4),
            end=SourcePosition(2, 10),
            properties={"class": ["body"]},
        ),
        DecorationItem(
            start=SourcePosition(1, 14),
            end=SourcePosition(1, 22),
            always_wrap=True,
            properties={"class": ["string"]},
        ),
    ]

    root = decorate_code(code, decorations)

    print("=== SOURCE ===")
    print(code)
    print("\n=== LINES ===")
    for i, line in enumerate(line_elements(find_code(root))):
        parts = []
        for child in line.children:
            cls = " ".join(getattr(child, "properties", {}).get("class", []))
            parts.append(f"<{child.tag_name} {cls}>{stringify(child)!r}")
        print(f"{i} [{' '.join(line.properties.get('class', []))}] " + " ".join(parts))
