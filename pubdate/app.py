# CLI entry
import argparse, csv, logging, sys
from pathlib import Path
from typing import Optional

from pubdate.config import DEFAULT_CONFIG_PATH, ResolverConfig, load_config
from pubdate.pipeline import extract_published_date

logger = logging.getLogger(__name__)


def read_html(html_path: Optional[str]) -> Optional[str]:
    if not html_path:
        return None
    if html_path == "-":
        return sys.stdin.read()
    try:
        return Path(html_path).read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.warning("could not read %s: %s", html_path, e)
        return None


def run_one(url: str, html_path: Optional[str], cfg: ResolverConfig) -> str:
    result = extract_published_date(url, read_html(html_path), parser=cfg.html_parser)
    return result.model_dump_json()


def run_from_csv(csv_path: str, out: str, cfg: ResolverConfig) -> int:
    outp = Path(out); outp.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    with open(csv_path, newline="") as f, open(out, "w") as f_out:
        rdr = csv.DictReader(f)
        for row in rdr:
            url = (row.get("url") or "").strip()
            record = run_one(url, (row.get("html_path") or "").strip() or None, cfg)
            f_out.write(record + "\n")
            count += 1
    logger.info("wrote %d records to %s", count, out)
    return count


def main(argv=None):
    ap = argparse.ArgumentParser(description="Infer article publication dates")
    ap.add_argument("--url", help="article URL")
    ap.add_argument("--html", help="path to the article HTML ('-' for stdin)")
    ap.add_argument("--csv", help="path to CSV with url[,html_path] columns")
    ap.add_argument("--out", default="data/published_dates.jsonl")
    ap.add_argument("--config", default=DEFAULT_CONFIG_PATH)
    args = ap.parse_args(argv)

    cfg = load_config(args.config)
    logging.basicConfig(level=cfg.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.csv:
        run_from_csv(args.csv, args.out, cfg)
    elif args.url is not None:
        print(run_one(args.url, args.html, cfg))
    else:
        print("Provide --url or --csv"); sys.exit(1)

if __name__ == "__main__":
    main()
