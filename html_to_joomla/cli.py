#!/usr/bin/env python3
"""
Command line entry point.

Converts an HTML file, or a live URL fetched through Firecrawl, into the
Joomla / YOOtheme builder configuration.
"""

import argparse
import json
import logging
import sys
import time

from .config import ConfigError, load_config
from .converter import convert, convert_html
from .fetcher import FirecrawlService, is_valid_url


def default_output_name() -> str:
    """Download-style file name, stamped with epoch milliseconds."""
    return f"joomla-config-{int(time.time() * 1000)}.json"


def _load_result(source: str, config_path: str):
    if is_valid_url(source):
        config = load_config(config_path)
        scrape_result = FirecrawlService(config).scrape_website(source)
        if not scrape_result.success:
            print(f"Scraping failed: {scrape_result.error}", file=sys.stderr)
            sys.exit(1)
        return convert(scrape_result.data)

    try:
        with open(source, 'r', encoding='utf-8') as f:
            html_content = f.read()
    except OSError as e:
        print(f"Error reading file: {e}", file=sys.stderr)
        sys.exit(1)
    return convert_html(html_content)


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description='Convert a website to Joomla / YOOtheme builder JSON')
    parser.add_argument('source', help='Input HTML file, or an http(s) URL to scrape')
    parser.add_argument('output_file', nargs='?', help='Output JSON file (optional, defaults to stdout)')
    parser.add_argument('-c', '--config', help='JSON config file path for the scraping service')
    parser.add_argument('--download', action='store_true',
                        help='Write to joomla-config-<timestamp>.json in the current directory')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )

    try:
        result = _load_result(args.source, args.config)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    json_output = json.dumps(result, indent=2, ensure_ascii=False)

    output_file = args.output_file or (default_output_name() if args.download else None)
    if output_file:
        try:
            with open(output_file, 'w', encoding='utf-8') as f:
                f.write(json_output)
            print(f"Output saved to: {output_file}", file=sys.stderr)
        except OSError as e:
            print(f"Error writing output file: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        print(json_output)


if __name__ == '__main__':
    main()
