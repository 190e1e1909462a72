"""
Campaign brief export - Markdown and PDF summaries of a campaign.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import markdown

from .config import ProductAnalysis

PDF_CSS = """
@page {
    size: A4;
    margin: 2cm;
}

body {
    font-family: 'DejaVu Sans', 'Segoe UI', Arial, sans-serif;
    line-height: 1.6;
    color: #333;
    font-size: 11pt;
}

h1 {
    color: #2c3e50;
    border-bottom: 3px solid #6366f1;
    padding-bottom: 10px;
    font-size: 24pt;
    margin-top: 0;
}

h2 {
    color: #34495e;
    border-bottom: 2px solid #95a5a6;
    padding-bottom: 5px;
    margin-top: 20px;
    font-size: 16pt;
    page-break-after: avoid;
}

h3 {
    color: #7f8c8d;
    margin-top: 15px;
    font-size: 13pt;
    page-break-after: avoid;
}

ul, ol {
    margin: 10px 0;
    padding-left: 25px;
}

li {
    margin: 5px 0;
}

code {
    background-color: #ecf0f1;
    padding: 2px 6px;
    border-radius: 3px;
    font-family: 'Courier New', monospace;
    font-size: 10pt;
}

pre {
    background-color: #2c3e50;
    color: #ecf0f1;
    padding: 15px;
    border-radius: 5px;
    white-space: pre-wrap;
    page-break-inside: avoid;
}

blockquote {
    border-left: 4px solid #6366f1;
    padding-left: 15px;
    margin: 15px 0;
    color: #555;
    font-style: italic;
}

table {
    border-collapse: collapse;
    width: 100%;
    margin: 15px 0;
}

th, td {
    border: 1px solid #bdc3c7;
    padding: 8px;
    text-align: left;
}

th {
    background-color: #6366f1;
    color: white;
    font-weight: bold;
}
"""


def build_campaign_brief(
    analysis: ProductAnalysis,
    script: Optional[str] = None,
    broll_concepts: Optional[List[str]] = None,
) -> str:
    """Render the campaign's analysis, script and B-roll ideas as Markdown."""
    lines = [
        f"# Campaign Brief: {analysis.product_name}",
        "",
        "## Product Intel",
        "",
        "| Field | Value |",
        "| --- | --- |",
        f"| Product | {analysis.product_name} |",
        f"| Type | {analysis.product_type} |",
        f"| Materials | {', '.join(analysis.materials) or '-'} |",
        f"| Palette | {', '.join(analysis.primary_colors) or '-'} |",
        "",
        "### Core Persona",
        "",
        f"> {analysis.target_audience or 'Not identified'}",
        "",
    ]
    if script:
        lines += ["## Viral Script", "", "```", script.strip(), "```", ""]
    if broll_concepts:
        lines += ["## Supplement B-Roll (Veo Prompts)", ""]
        for idx, concept in enumerate(broll_concepts, start=1):
            lines.append(f"{idx}. {concept}")
        lines.append("")
    return "\n".join(lines)


def markdown_to_html(md_content: str, title: str = "Viral Creative Lab") -> str:
    """Wrap rendered Markdown in a standalone HTML document."""
    html_content = markdown.markdown(md_content, extensions=["extra", "tables"])
    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>{title}</title>
</head>
<body>
    {html_content}
</body>
</html>
"""


def render_pdf(md_content: str, title: str = "Viral Creative Lab") -> bytes:
    """
    Convert Markdown to a styled PDF.

    WeasyPrint needs native Pango libraries, so it is imported on first use.
    """
    from weasyprint import CSS, HTML

    return HTML(string=markdown_to_html(md_content, title)).write_pdf(
        stylesheets=[CSS(string=PDF_CSS)]
    )


def pdf_for_brief(cached: Optional[Tuple[str, bytes]], brief_md: str) -> Optional[bytes]:
    """Return cached PDF bytes only if they were rendered from ``brief_md``."""
    if not cached:
        return None
    rendered_md, pdf = cached
    return pdf if rendered_md == brief_md else None
