#!/usr/bin/env python3
"""
InnTrackerV1 (c) 2025 S1riuSS3301
Licensed under end-user license agreement (EULA). See LICENSE for details.
Use permitted only in original, unmodified form for personal/internal, non-commercial purposes.
"""
import pathlib
import sys

ROOT = pathlib.Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from storage import load_results  # noqa: E402

DEFAULT_CHAPTERS = ROOT / "wandering-inn-chapters.json"
DEFAULT_WORDCOUNT = ROOT / "wandering-inn-wordcount.json"


def compare(chapters: dict, counts: dict):
    """Возвращает (главы web serial без числа слов, записи о словах без главы)."""
    titles = []
    seen = set()
    for ch in chapters.get('chapters', []):
        ws = ch.get('ws')
        if ws and ws not in seen:
            seen.add(ws)
            titles.append(ws)
    missing = [t for t in titles if t not in counts]
    orphans = [name for name in counts if name not in seen]
    return missing, orphans


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    chapters_file = pathlib.Path(argv[0]) if len(argv) > 0 else DEFAULT_CHAPTERS
    wordcount_file = pathlib.Path(argv[1]) if len(argv) > 1 else DEFAULT_WORDCOUNT
    try:
        chapters, counts = load_results(str(chapters_file), str(wordcount_file))
    except Exception as e:
        print(f"[ERR] READ: {e}")
        return 2

    missing, orphans = compare(chapters, counts)
    print(f"Глав в оглавлении: {len(chapters.get('chapters', []))}")
    print(f"Записей о словах: {len(counts)}")
    print(f"Без числа слов: {len(missing)} {missing[:10]}{' ...' if len(missing) > 10 else ''}")
    print(f"Без главы в оглавлении: {len(orphans)} {orphans[:10]}{' ...' if len(orphans) > 10 else ''}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
