"""
Generate PDF User Guide from Markdown
Simple script to convert docs/USER_GUIDE.md to PDF format for end clients.
"""

import argparse
from pathlib import Path

from creative_lab.brief import render_pdf


def generate_pdf(md_file: Path, output_file: Path) -> int:
    """Convert a Markdown guide to PDF with the brief stylesheet."""
    if not md_file.exists():
        print(f"❌ {md_file} not found!")
        return 1

    md_content = md_file.read_text(encoding="utf-8")

    try:
        output_file.write_bytes(render_pdf(md_content, title="Viral Creative Lab - User Guide"))
    except Exception as e:
        print(f"❌ Error generating PDF: {e}")
        print("\n💡 Make sure you have installed:")
        print("   pip install markdown weasyprint")
        return 1

    print(f"✅ PDF generated successfully: {output_file}")
    print(f"📄 File size: {output_file.stat().st_size / 1024:.1f} KB")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Render the user guide to PDF")
    parser.add_argument("input", nargs="?", default="docs/USER_GUIDE.md", help="Markdown file")
    parser.add_argument("-o", "--output", default="Viral_Creative_Lab_User_Guide.pdf", help="PDF output path")
    args = parser.parse_args()
    return generate_pdf(Path(args.input), Path(args.output))


if __name__ == "__main__":
    raise SystemExit(main())
