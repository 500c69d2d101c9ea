"""Render the app's OpenAPI schema as a Markdown reference (docs/API_Documentation.md)."""
import argparse
import json
from datetime import datetime
from pathlib import Path
from typing import List, Optional


def render_markdown(schema: dict, generated_at: Optional[datetime] = None) -> str:
    info = schema.get("info", {})
    title = info.get("title", "Éclat Bistro API")
    version = info.get("version", "1.0.0")
    generated_at = generated_at or datetime.now()

    md: List[str] = []
    md.append(f"# {title} API Documentation\n")
    md.append(f"**Version:** {version}\n")
    md.append(f"**Generated on:** {generated_at.strftime('%Y-%m-%d %H:%M:%S')}\n")
    if info.get("description"):
        md.append(f"\n{info['description']}\n")

    for path, methods in schema.get("paths", {}).items():
        md.append(f"\n## `{path}`\n")
        for method, details in methods.items():
            md.append(f"### {method.upper()}: {details.get('summary', '')}\n")
            if details.get("description"):
                md.append(f"{details['description']}\n")
            md.append(f"**Tags:** {', '.join(details.get('tags', []))}\n")

            params = details.get("parameters", [])
            if params:
                md.append("\n**Parameters:**\n")
                for p in params:
                    required = " (required)" if p.get("required") else ""
                    md.append(f"- `{p['name']}` ({p['in']}){required} {p.get('description', '')}".rstrip() + "\n")

            body = details.get("requestBody", {}).get("content", {}).get("application/json", {})
            ref = body.get("schema", {}).get("$ref")
            if ref:
                md.append(f"\n**Request Body:** `{ref.rsplit('/', 1)[-1]}`\n")

            md.append("\n**Responses:**\n")
            for code, resp in details.get("responses", {}).items():
                md.append(f"- `{code}`: {resp.get('description', '')}\n")
            md.append("\n---\n")

    return "\n".join(md)


def main(argv=None) -> Path:
    parser = argparse.ArgumentParser(description="Generate Markdown API docs from the OpenAPI schema")
    parser.add_argument("--out-dir", default="docs")
    args = parser.parse_args(argv)

    from eclat.main import app

    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    schema = app.openapi()
    (out_dir / "openapi.json").write_text(json.dumps(schema, indent=2), encoding="utf-8")
    output_file = out_dir / "API_Documentation.md"
    output_file.write_text(render_markdown(schema), encoding="utf-8")
    print(f"Documentation generated at {output_file}")
    return output_file


if __name__ == "__main__":
    main()
