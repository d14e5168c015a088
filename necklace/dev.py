#!/usr/bin/env python3
"""
ADD NECKLACE local runner.
Checks the configuration and serves the Streamlit page.
"""

import argparse
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from necklace.config import Config

APP_PATH = Path(__file__).parent / 'app.py'


def build_command(port: int, headless: bool) -> List[str]:
    cmd = [
        sys.executable, "-m", "streamlit", "run", str(APP_PATH),
        "--server.port", str(port),
    ]
    if headless:
        cmd += ["--server.headless", "true"]
    return cmd


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Serve the Add Necklace page locally."
    )
    parser.add_argument(
        "-p", "--port",
        type=int,
        default=8501,
        help="Port to serve on (default: 8501)",
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Do not open a browser window",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=Path.cwd() / ".env",
        help="dotenv file to load (default: ./.env)",
    )
    args = parser.parse_args(argv)

    load_dotenv(args.env_file)

    try:
        config = Config.from_env()
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Add Necklace using model {config.model}")
    print(f"URL: http://localhost:{args.port}")
    print("Press Ctrl+C to stop\n")

    server_proc = subprocess.Popen(build_command(args.port, args.headless))
    try:
        return server_proc.wait()
    except KeyboardInterrupt:
        print("\nStopping server.")
        server_proc.terminate()
        try:
            server_proc.wait(timeout=5)
        except subprocess.TimeoutExpired:
            server_proc.kill()
        return 0


if __name__ == "__main__":
    raise SystemExit(main())
