# cli/giftres.py
# Command-line front end for the gift keyword resolver.
# - Resolve one or more keywords (resolve)
# - Resolve a file of keywords, one per line (batch)
# - Show the normalized form of a keyword (normalize)
# - Validate lexicon/fallback/heuristics configuration (check)
#
# Examples:
#   giftres resolve "chocolat noir" "rhum arrangé"
#   giftres resolve "bougie parfumée" --json
#   giftres batch data/keywords.txt --jsonl
#   giftres check --config config.toml
#
# Exit codes: 0 ok, 2 nothing to process, 3 configuration/data error.

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

import click

from config.loader import load_config
from gkr_core.models import ResolveResult
from gkr_utils.logging_setup import level_from_flags, setup_logging
from gkr_utils.normalizers import normalize_fr
from resolver.errors import ResolverError
from resolver.service import GiftResolver, summarize, top_stores

LOGGER = logging.getLogger("giftres")

EXIT_EMPTY = 2
EXIT_ERROR = 3


def _build_resolver(config_path: Optional[str]) -> GiftResolver:
    cfg = load_config(Path(config_path) if config_path else None)
    return GiftResolver.from_config(cfg)


def _print_human(result: ResolveResult, limit: int) -> None:
    stores = top_stores(result, limit)
    click.echo("-" * 60)
    click.echo(f"Keyword    : {result.keyword or '(empty)'}")
    click.echo(f"Confidence : {result.confidence.value}")
    if result.matched_key:
        click.echo(f"Matched    : {result.matched_key}")
    click.echo(
        "Category   : "
        f"{result.main_category}"
        f"{(' / ' + result.subcategory) if result.subcategory else ''}"
    )
    click.echo(f"Stores     : {', '.join(stores) if stores else 'N/A'}")


def _as_record(result: ResolveResult, limit: int) -> dict:
    rec = result.to_dict()
    rec["stores"] = top_stores(result, limit)
    return rec


def _read_keywords(path: Path) -> List[str]:
    text = path.read_text(encoding="utf-8", errors="ignore")
    return [line.strip() for line in text.splitlines() if line.strip()]


# ----------------------------- Commands -----------------------------
@click.group()
@click.option("--quiet", is_flag=True, help="Only warnings/errors in logs.")
@click.option("--verbose", is_flag=True, help="Debug logs (shows the tier decisions).")
def cli(quiet: bool, verbose: bool) -> None:
    """Gift keyword -> category and stores."""
    setup_logging(level_from_flags(quiet, verbose))


@cli.command("resolve")
@click.argument("keywords", nargs=-1)
@click.option("--json", "as_json", is_flag=True, help="Output a JSON payload.")
@click.option("--limit", type=int, default=None, help="Max stores per result.")
@click.option("--config", "config_path", type=click.Path(dir_okay=False), default=None)
def resolve_cmd(
    keywords: tuple, as_json: bool, limit: Optional[int], config_path: Optional[str]
) -> None:
    """Resolve KEYWORDS and print category, subcategory and stores."""
    if not keywords:
        raise click.UsageError("Provide one or more KEYWORDS.")
    try:
        resolver = _build_resolver(config_path)
    except (ResolverError, FileNotFoundError) as e:
        LOGGER.error(str(e))
        raise SystemExit(EXIT_ERROR)

    cap = resolver.store_limit if limit is None else limit
    results = [resolver.resolve(k) for k in keywords]
    if as_json:
        payload = {
            "schema_version": "1.0",
            "results": [_as_record(r, cap) for r in results],
        }
        click.echo(json.dumps(payload, ensure_ascii=False))
    else:
        for r in results:
            _print_human(r, cap)


@cli.command("batch")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, readable=True))
@click.option("--jsonl", is_flag=True, help="Stream one JSON record per keyword.")
@click.option("--config", "config_path", type=click.Path(dir_okay=False), default=None)
def batch_cmd(path: str, jsonl: bool, config_path: Optional[str]) -> None:
    """Resolve every non-blank line of PATH and report per-tier counts."""
    keywords = _read_keywords(Path(path))
    if not keywords:
        LOGGER.warning("No keywords found in: %s", path)
        raise SystemExit(EXIT_EMPTY)
    try:
        resolver = _build_resolver(config_path)
    except (ResolverError, FileNotFoundError) as e:
        LOGGER.error(str(e))
        raise SystemExit(EXIT_ERROR)

    results = [resolver.resolve(k) for k in keywords]
    if jsonl:
        for r in results:
            rec = {"schema_version": "1.0", "result": _as_record(r, resolver.store_limit)}
            click.echo(json.dumps(rec, ensure_ascii=False))
        return

    stats = summarize(results)
    click.echo(f"[info] resolved {stats['total']} keyword(s), {stats['found']} found.")
    for tier, n in stats["by_confidence"].items():
        click.echo(f"  {tier:<9}: {n}")
    for cat, n in stats["by_category"].items():
        click.echo(f"  {cat}: {n}")


@cli.command("normalize")
@click.argument("text")
def normalize_cmd(text: str) -> None:
    """Print the normalized (lexicon) form of TEXT."""
    click.echo(normalize_fr(text))


@cli.command("check")
@click.option("--config", "config_path", type=click.Path(dir_okay=False), default=None)
def check_cmd(config_path: Optional[str]) -> None:
    """Load and validate the lexicon, fallback table and heuristics."""
    try:
        resolver = _build_resolver(config_path)
    except (ResolverError, FileNotFoundError) as e:
        LOGGER.error(str(e))
        click.echo(f"[error] {e}", err=True)
        raise SystemExit(EXIT_ERROR)

    lex = resolver.lexicon
    click.echo(
        f"[ok] {len(lex)} keyword(s), {len(lex.aliases())} alias(es), "
        f"{len(resolver.rules)} heuristic rule(s), max_distance={resolver.max_distance}"
    )
    per_cat = {cat: 0 for cat in resolver.fallbacks}
    for key in lex.keys():
        cat = lex.exact(key).main_category
        per_cat[cat] = per_cat.get(cat, 0) + 1
    for cat, n in per_cat.items():
        marker = "" if cat in resolver.fallbacks else "  [warn] no fallback stores"
        click.echo(f"  {cat}: {n}{marker}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
