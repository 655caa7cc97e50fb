"""
`python -m scripts.replay_transcript "Had oatmeal and coffee this morning"`

Runs one transcript through the configured pipeline, the same way the
webhook does. `--dry-run` prints the rows instead of appending them.
"""
import argparse
import asyncio
import sys

from config import settings
from core import parser, sanitizer
from core.errors import MalformedResponseError
from core.transformer import TranscriptTransformer
from main import build_pipeline
from services.gemini import GeminiLanguageModel


async def _dry_run(transcript: str) -> int:
    llm = GeminiLanguageModel(
        settings.gemini_api_key,
        model=settings.gemini_model,
        temperature=settings.gemini_temperature,
    )
    raw = await TranscriptTransformer(llm).transform(transcript)
    try:
        entries = parser.parse(sanitizer.sanitize(raw))
    except MalformedResponseError as e:
        print(f"[ERROR] {e}\n{e.raw}", file=sys.stderr)
        return 1
    for entry in entries:
        print("\t".join(str(c) for c in entry.to_row()))
    print(f"✓ {len(entries)} entries (not appended)")
    return 0


async def _run(transcript: str) -> int:
    appended = await build_pipeline().process(transcript)
    print(f"✓ appended {appended} rows")
    return 0


if __name__ == "__main__":
    ap = argparse.ArgumentParser()
    ap.add_argument("transcript", help="voice transcript text, or - to read stdin")
    ap.add_argument("--dry-run", action="store_true")
    args = ap.parse_args()
    text = sys.stdin.read() if args.transcript == "-" else args.transcript
    runner = _dry_run if args.dry_run else _run
    raise SystemExit(asyncio.run(runner(text)))
