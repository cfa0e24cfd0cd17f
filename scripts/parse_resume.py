"""Parse a resume document and dump the extracted record, for manual checks."""

from __future__ import annotations

import asyncio
import json
import os
import sys
from pathlib import Path

os.environ.setdefault("RESUME_LOG_LEVEL", "WARNING")
os.environ.setdefault("RESUME_LOG_FORMAT", "console")

project_root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(project_root / "src"))


async def main(target: Path) -> None:
    """Extract text, then fields, printing both."""
    from resume_core.config.settings import Settings
    from resume_extractor.observability import configure_logging
    from resume_extractor.service import ResumeParsingService

    settings = Settings()
    configure_logging(settings)

    print(f"Parsing resume: {target}")
    result = await ResumeParsingService(settings).parse_file(target)

    print("=== Extracted text (first 20 lines) ===")
    for line in result.raw_text.splitlines()[:20]:
        print(f"  {line}")

    print("=== Parsed Resume Data ===")
    print(json.dumps(result.resume.to_json_dict(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    asyncio.run(main(Path(sys.argv[1] if len(sys.argv) > 1 else "demofiles/cv.pdf")))
