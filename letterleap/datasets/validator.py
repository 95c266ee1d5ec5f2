"""
Word-list validator for LetterLeap.

What this module does:
- Inspect a word-list source (local path or http(s) URL) for one word length N.
- Count raw lines, usable N-letter words, duplicates and skipped lines.
- Compute SHA-256 of the raw bytes so a deployment can pin its list.
- Check that the puzzle's start and target words are actually in the list
  (a list without them makes the puzzle unwinnable).
- Return a machine-readable dict and provide a pretty one-line summary.

Typical use:
    from letterleap.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("letterleap/datasets/data/words.txt", 5, "state", "leash")
    print(pretty_summary(rep))
"""

from __future__ import annotations

import hashlib
from dataclasses import asdict, dataclass
from typing import Dict, List

import requests

from .io import read_bytes


@dataclass
class WordlistReport:
    """Diagnostics for one word-list source."""
    source: str            # path or URL (as given)
    exists: bool           # could the source be read at all?
    raw_lines: int         # non-blank lines in the source
    count: int             # lines that are usable N-letter words
    unique_count: int      # distinct usable words after lowercasing
    skipped_lines: int     # non-blank lines of another length
    sha256: str            # SHA-256 of the raw bytes (empty if unreadable)
    N: int
    start_word: str
    target_word: str
    start_present: bool
    target_present: bool
    passed: bool
    issues: List[str]      # human-friendly list of problems (if any)


def _sha256_bytes(raw: bytes) -> str:
    """SHA-256 of the bytes as stored, line endings included."""
    return hashlib.sha256(raw).hexdigest()


def validate_wordlist(source: str, N: int, start_word: str, target_word: str) -> Dict:
    """
    Validate a word list for a puzzle of length N.

    Returns a JSON-serializable dict (WordlistReport schema). `passed` requires
    a readable source with at least one usable word that contains both the
    start and the target word. Skipped lines and duplicates are reported but
    do not fail the check; the loader tolerates both.
    """
    issues: List[str] = []
    start_word = start_word.lower()
    target_word = target_word.lower()

    try:
        raw = read_bytes(source)
        text = raw.decode("utf-8")
    except (OSError, UnicodeDecodeError, requests.RequestException) as e:
        issues.append(f"word list not readable: {source} ({e})")
        rep = WordlistReport(
            source=str(source), exists=False, raw_lines=0, count=0, unique_count=0,
            skipped_lines=0, sha256="", N=N, start_word=start_word,
            target_word=target_word, start_present=False, target_present=False,
            passed=False, issues=issues,
        )
        return asdict(rep)

    lines = [ln.strip() for ln in text.splitlines() if ln.strip()]
    usable = [ln.lower() for ln in lines if len(ln) == N]
    words = set(usable)

    start_ok = start_word in words
    target_ok = target_word in words

    if not usable:
        issues.append(f"word list contains 0 words of length {N}")
    if not start_ok:
        issues.append(f"start word '{start_word}' missing from word list")
    if not target_ok:
        issues.append(f"target word '{target_word}' missing from word list")

    skipped = len(lines) - len(usable)
    if skipped:
        issues.append(f"{skipped} line(s) skipped (length != {N})")
    if len(usable) != len(words):
        issues.append("word list contains duplicate words")

    rep = WordlistReport(
        source=str(source),
        exists=True,
        raw_lines=len(lines),
        count=len(usable),
        unique_count=len(words),
        skipped_lines=skipped,
        sha256=_sha256_bytes(raw),
        N=N,
        start_word=start_word,
        target_word=target_word,
        start_present=start_ok,
        target_present=target_ok,
        passed=bool(usable) and start_ok and target_ok,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for console/docs.

    Example:
        N=5 | words=8938 (uniq=8938, sha=abc123...) | state=True leash=True | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} "
        f"(uniq={report['unique_count']}, sha={sha}) "
        f"| {report['start_word']}={report['start_present']} "
        f"{report['target_word']}={report['target_present']} | {status}"
    )
