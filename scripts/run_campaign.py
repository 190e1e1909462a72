#!/usr/bin/env python3
"""
Run a campaign from the command line: analyze a product photo, then write the
script, B-roll ideas, lifestyle photo and (optionally) the hero video to a
directory. Useful for checking credentials and models outside the browser.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from dotenv import load_dotenv

from creative_lab.brief import build_campaign_brief
from creative_lab.copywriter import ideate_broll, write_viral_script
from creative_lab.errors import CreativeLabError
from creative_lab.gemini_client import get_genai_client
from creative_lab.lifestyle_image import generate_lifestyle_image
from creative_lab.product_analyst import analyze_product_image
from creative_lab.utils import data_url_to_bytes, load_image_bytes, to_data_url
from creative_lab.video_director import generate_product_video


def _fail(msg: str) -> int:
    print(f"ERROR: {msg}", file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("image", help="Path to the product photo")
    parser.add_argument("--out", default="campaign_out", help="Output directory")
    parser.add_argument("--video", action="store_true", help="Also generate the Veo hero video (paid key)")
    parser.add_argument("--skip-image", action="store_true", help="Skip the lifestyle photo")
    args = parser.parse_args(argv)

    load_dotenv()
    image_path = Path(args.image)
    if not image_path.exists():
        return _fail(f"Image not found: {image_path}")
    out_dir = Path(args.out)
    out_dir.mkdir(parents=True, exist_ok=True)

    try:
        client = get_genai_client()
        with image_path.open("rb") as fh:
            image = to_data_url(*load_image_bytes(fh))

        analysis = analyze_product_image(image, client=client)
        (out_dir / "analysis.json").write_text(json.dumps(analysis.to_dict(), indent=2), encoding="utf-8")
        print(f"OK: analysis -> {analysis.product_name} ({analysis.product_type})")

        script = write_viral_script(analysis, client=client)
        (out_dir / "script.txt").write_text(script, encoding="utf-8")
        print("OK: script written")

        concepts = ideate_broll(analysis, client=client)
        (out_dir / "broll.json").write_text(json.dumps(concepts, indent=2), encoding="utf-8")
        print(f"OK: {len(concepts)} B-roll concepts")

        if not args.skip_image:
            lifestyle, _ = data_url_to_bytes(generate_lifestyle_image(image, analysis, client=client))
            (out_dir / "lifestyle.png").write_bytes(lifestyle)
            print("OK: lifestyle photo saved")

        if args.video:
            video = generate_product_video(image, analysis, on_status=lambda msg: print(f"   {msg}"), client=client)
            (out_dir / "product-hero.mp4").write_bytes(video)
            print("OK: hero video saved")

        (out_dir / "campaign-brief.md").write_text(
            build_campaign_brief(analysis, script, concepts), encoding="utf-8"
        )
    except CreativeLabError as exc:
        return _fail(str(exc))
    except Exception as exc:
        return _fail(f"{type(exc).__name__}: {exc}")

    print(f"OK: campaign written to {out_dir}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
