# File: dayview/cli.py
"""
Command-line entry point: lay out one day's events from a JSON file.

Input is either a JSON list of events or an object with an "events" list.
Output is written as JSON to stdout or to --output.
"""

import argparse
import datetime
import json
import sys
import time
from pathlib import Path
from typing import Any, List, Optional

from dayview.core.config_manager import Config
from dayview.core.layout_engine import DayLayoutEngine
from dayview.models import LayoutConfig, LayoutConfigError, event_from_dict
from dayview.utils.logger import setup_logger

logger = setup_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="dayview-layout",
        description="Compute side-by-side day-view geometry for overlapping events.",
    )
    ap.add_argument("input", help="JSON file with events (list or {\"events\": [...]})")
    ap.add_argument("--date", help="Rendered day as YYYY-MM-DD (default: each event's start date)")
    ap.add_argument("--output", "-o", help="Write JSON here instead of stdout")
    ap.add_argument("--config", help="Layout config JSON file (default: config/layout.json if present)")
    ap.add_argument("--start-hour", type=int, help="Hour shown at the top of the grid (0-23)")
    ap.add_argument("--minute-height", type=float, help="Pixels per minute")
    ap.add_argument("--item-width", type=float, help="Percent of a column an event occupies (0-100)")
    ap.add_argument("--timezone", help="Display timezone, e.g. Europe/Amsterdam")
    return ap


def load_events(path: Path) -> List[Any]:
    """Read raw event dicts from a JSON file."""
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get('events', [])
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of events in {path}")
    return [event_from_dict(item) for item in data if isinstance(item, dict)]


def resolve_config(args: argparse.Namespace) -> LayoutConfig:
    """Merge file/env configuration with command-line overrides."""
    base = Config.load_layout_config(Path(args.config) if args.config else None)
    overrides = {
        'day_view_start_hour': args.start_hour,
        'minute_height_px': args.minute_height,
        'item_width_percent': args.item_width,
        'timezone': args.timezone,
    }
    settings = {
        'day_view_start_hour': base.day_view_start_hour,
        'minute_height_px': base.minute_height_px,
        'item_width_percent': base.item_width_percent,
        'timezone': base.timezone,
    }
    settings.update({k: v for k, v in overrides.items() if v is not None})
    return LayoutConfig.from_dict(settings)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main execution function.
    
    Returns:
        Exit code (0 for success, 1 for failure)
    """
    start_time = time.time()
    args = build_parser().parse_args(argv)
    
    try:
        config = resolve_config(args)
        day = datetime.date.fromisoformat(args.date) if args.date else None
        events = load_events(Path(args.input))
        
        result = DayLayoutEngine(config).run_day(events, day)
        
        output = result.to_dict()
        output['config'] = config.to_dict()
        output['date'] = day.isoformat() if day else None
        output['generated_at'] = datetime.datetime.now().isoformat()
        
        text = json.dumps(output, indent=2, default=str, ensure_ascii=False)
        if args.output:
            out_path = Path(args.output)
            out_path.parent.mkdir(parents=True, exist_ok=True)
            out_path.write_text(text + "\n", encoding='utf-8')
            logger.info(f"Layout saved to {out_path}")
        else:
            sys.stdout.write(text + "\n")
        return 0
    
    except FileNotFoundError as e:
        logger.error(f"Could not find: {e.filename}")
        return 1
    
    except LayoutConfigError as e:
        logger.error(f"Invalid layout configuration: {e}")
        return 1
    
    except json.JSONDecodeError as e:
        logger.error(f"Input is not valid JSON: {e}")
        return 1
    
    except ValueError as e:
        logger.error(f"Invalid input: {e}")
        return 1
    
    finally:
        elapsed = time.time() - start_time
        logger.debug(f"Total execution time: {elapsed:.2f} seconds")


if __name__ == "__main__":
    sys.exit(main())
