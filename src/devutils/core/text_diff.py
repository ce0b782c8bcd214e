import difflib


def _normalise(line: str) -> str:
    return " ".join(line.split())


def compare(original: str, modified: str, ignore_whitespace: bool = False, context: int = 3) -> dict:
    """Line diff of two texts, as a unified diff plus the changed ranges."""
    a_lines = original.splitlines()
    b_lines = modified.splitlines()

    if ignore_whitespace:
        a_keys = [_normalise(line) for line in a_lines]
        b_keys = [_normalise(line) for line in b_lines]
    else:
        a_keys, b_keys = a_lines, b_lines

    matcher = difflib.SequenceMatcher(None, a_keys, b_keys, autojunk=False)

    added = removed = 0
    hunks = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            continue
        removed += i2 - i1
        added += j2 - j1
        hunks.append(
            {
                "tag": tag,
                "original_start": i1 + 1,
                "original_end": i2,
                "modified_start": j1 + 1,
                "modified_end": j2,
                "original_lines": a_lines[i1:i2],
                "modified_lines": b_lines[j1:j2],
            }
        )

    unified = "\n".join(
        difflib.unified_diff(
            a_keys if ignore_whitespace else a_lines,
            b_keys if ignore_whitespace else b_lines,
            fromfile="original",
            tofile="modified",
            n=context,
            lineterm="",
        )
    )

    return {
        "identical": not hunks,
        "added": added,
        "removed": removed,
        "unified": unified,
        "hunks": hunks,
    }
