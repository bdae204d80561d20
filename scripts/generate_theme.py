"""
Generate a light/dark theme pair and print it as JSON.

Usage (from repo root):
    python scripts/generate_theme.py --mode triadic --base-color "#3b82f6"
    python scripts/generate_theme.py --mode random --entropy demo --saturation 2 --format oklch
    python -m scripts.generate_theme --mode analogous --brightness -1

Notes:
    - Defaults come from `configs/default.yaml` (and root `config.yaml` if present);
      `THEMEGEN_DEFAULT_MODE` applies only when no config sets a mode. Flags win.
    - Without `--base-color` or `--entropy` the output is not reproducible.
    - Exit status 2 on invalid arguments (argparse convention).
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC = REPO_ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from common.logging import setup_default_logging  # noqa: E402
from common.settings import get as _get_settings  # noqa: E402
from themegen import (  # noqa: E402
    ColorFormat,
    GenerationRequest,
    HarmonyMode,
    PaletteResult,
    format_tokens,
    generate,
    philosophy_for,
)
from util.utils import generation_defaults, load_config  # noqa: E402

logger = logging.getLogger("themegen.cli")


def build_parser(defaults: Dict[str, Any]) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Generate an OKLCH light/dark theme pair.")
    p.add_argument(
        "--mode",
        choices=[m.value for m in HarmonyMode],
        default=defaults.get("mode", _get_settings().DEFAULT_MODE),
    )
    p.add_argument("--base-color", default=defaults.get("base_color"), help="#RRGGBB seed color")
    p.add_argument("--saturation", type=int, default=defaults.get("saturation", 0), help="-5..5")
    p.add_argument("--contrast", type=int, default=defaults.get("contrast", 0), help="-5..5")
    p.add_argument("--brightness", type=int, default=defaults.get("brightness", 0), help="-5..5")
    p.add_argument(
        "--format",
        choices=[f.value for f in ColorFormat],
        default=defaults.get("format", ColorFormat.HEX.value),
    )
    p.add_argument("--entropy", default=None, help="seed used when no base color is given")
    p.add_argument("--log-level", default=None, help="defaults to THEMEGEN_LOG_LEVEL")
    return p


def build_payload(result: PaletteResult, fmt: str, timestamp_ms: Optional[int] = None) -> Dict[str, Any]:
    """Wrap a result in the response envelope used by callers."""
    return {
        "light": format_tokens(result.light, fmt),
        "dark": format_tokens(result.dark, fmt),
        "metadata": {
            "style": result.mode.value,
            "seed": result.seed,
            "timestamp": timestamp_ms if timestamp_ms is not None else int(time.time() * 1000),
            "colorSpace": "OKLCH",
            "philosophy": philosophy_for(result.mode),
        },
    }


def main(argv: Optional[Sequence[str]] = None) -> int:
    defaults = generation_defaults(load_config(REPO_ROOT))
    parser = build_parser(defaults)
    args = parser.parse_args(argv)
    setup_default_logging(args.log_level)

    try:
        request = GenerationRequest.create(
            args.mode,
            args.base_color,
            args.saturation,
            args.contrast,
            args.brightness,
        )
    except ValueError as exc:
        parser.error(str(exc))

    result = generate(request, entropy=args.entropy)
    logger.info("generated mode=%s seed=%s", result.mode.value, result.seed)
    print(json.dumps(build_payload(result, args.format), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
