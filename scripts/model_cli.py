import argparse
import json
import logging
from pathlib import Path

from modelver.config import load_config
from modelver.hashing import hash_code
from modelver.types import StorageKind
from modelver.version import VersionParseError, parse_version


def parse_args():
    parser = argparse.ArgumentParser(description="Inspect model versions")
    parser.add_argument("--targets", action="store_true", help="Show configured target versions")
    parser.add_argument("--parse", type=str, metavar="VERSION", help="Parse a modelVersion string")
    parser.add_argument("--inspect", type=str, metavar="FILE", help="Inspect objects in a JSON file")
    parser.add_argument("--local", action="store_true", help="Compare against the local target")
    parser.add_argument("--env", type=str, help="Path to a .env file")
    return parser.parse_args()


def main():
    logging.basicConfig(level=logging.INFO)
    args = parse_args()
    config = load_config(args.env)

    if args.targets:
        print(f"Persisted: {config.latest_persisted}")
        print(f"Local: {config.latest_local}")
        return

    if args.parse:
        try:
            version = parse_version(args.parse)
        except VersionParseError as exc:
            print(f"Invalid: {exc}")
            return
        print(f"{version} {version.to_string()}")
        return

    if args.inspect:
        data = json.loads(Path(args.inspect).read_text(encoding="utf-8"))
        objects = data if isinstance(data, list) else [data]
        kind = StorageKind.LOCAL if args.local else StorageKind.PERSISTED
        for obj in objects:
            ident = obj.get("_id") or obj.get("id") or "-"
            try:
                version = parse_version(obj.get("modelVersion"))
                outdated = "outdated" if config.is_outdated(obj, kind) else "current"
            except VersionParseError as exc:
                print(f" - {ident}: invalid version ({exc})")
                continue
            print(f" - {ident}: version={version} hash={hash_code(obj)} {outdated}")
        return

    print("No action specified. Use --help.")


if __name__ == "__main__":
    main()
