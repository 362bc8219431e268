"""
Developer task runner using Invoke.
Run `inv --list` to see tasks.

Key tasks:
  inv resolve --keyword "chocolat noir"
  inv batch --input data/keywords.txt
  inv check
  inv test
  inv clean
"""

from invoke import task
from pathlib import Path
import shutil
import sys


REPO = Path(__file__).parent


def _python():
    """Return the python executable inside the current venv."""
    return sys.executable or "python"


def _giftres(c, *args):
    quoted = " ".join(f'"{a}"' for a in args)
    c.run(f'"{_python()}" -m cli.giftres {quoted}', pty=False)


@task(
    help={
        "keyword": "Gift keyword to resolve (quote multi-word keywords)",
        "json": "Print the JSON payload instead of the text block",
    }
)
def resolve(c, keyword, json=False):
    """Resolve one keyword."""
    args = ["resolve", keyword]
    if json:
        args.append("--json")
    _giftres(c, *args)


@task(help={"input": "Text file with one keyword per line", "jsonl": "JSON lines output"})
def batch(c, input, jsonl=False):
    """Resolve a keyword file and print tier counts."""
    args = ["batch", input]
    if jsonl:
        args.append("--jsonl")
    _giftres(c, *args)


@task
def check(c):
    """Validate lexicon, fallback table and heuristics."""
    _giftres(c, "check")


@task(help={"k": "pytest -k expression"})
def test(c, k=""):
    """Run the test suite."""
    extra = f' -k "{k}"' if k else ""
    c.run(f'"{_python()}" -m pytest -q{extra}', pty=False)


@task
def clean(c):
    """Remove caches."""
    for p in REPO.rglob("__pycache__"):
        shutil.rmtree(p, ignore_errors=True)
    shutil.rmtree(REPO / ".pytest_cache", ignore_errors=True)
