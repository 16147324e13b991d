#!/usr/bin/env python3
"""
InnTrackerV1 (c) 2025 S1riuSS3301
Licensed under end-user license agreement (EULA). See LICENSE for details.
Use permitted only in original, unmodified form for personal/internal, non-commercial purposes.
"""
import pathlib
import sys
from collections import Counter

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parent.parent))

from errors import StructuralParseError  # noqa: E402
from toc_parser import parse_toc  # noqa: E402

DEFAULT_FILE = "table-of-contents.html"


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    # путь к сохранённой странице оглавления первым аргументом
    file_path = argv[0] if argv else DEFAULT_FILE
    try:
        html = pathlib.Path(file_path).read_text(encoding='utf-8', errors='ignore')
    except Exception as e:
        print(f"[ERR] READ: {e}")
        return 2
    try:
        toc = parse_toc(html)
    except StructuralParseError as e:
        print(f"[ERR] PARSE: {e}")
        return 2

    print(f"Файл: {file_path}")
    print(f"Разметка: {toc.layout.value}")
    print(f"Томов: {len(toc.volumes)}, книг: {len(toc.books)}, глав: {len(toc.chapters)}")
    per_volume = Counter(c.volume_index for c in toc.chapters)
    for idx, name in enumerate(toc.volumes):
        print(f"  {name}: глав={per_volume.get(idx, 0)}")
    for d in toc.diagnostics:
        print(f"[SKIP] {d.where}: {d.reason}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
