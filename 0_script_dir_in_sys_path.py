import sys
import os
import logging
from pathlib import Path

# Set up the script directory and ensure it's in sys.path
script_directory = Path(__file__).resolve().parent
if str(script_directory) not in sys.path:
    sys.path.append(str(script_directory))

from dotenv import load_dotenv

from src.secrets import setup_secrets

import argparse
import uvicorn

# Import AFTER env is loaded

if __name__ == "__main__":
    ap = argparse.ArgumentParser()
    ap.add_argument("--port", type=int, default=8086)
    ap.add_argument("--env", type=str, default="dev")
    ap.add_argument("--log-level", type=str, default="info")

    args = ap.parse_args()

    # If the env file is delivered as an environment variable (containers), materialize it.
    if os.getenv("ENV_FILE"):
        setup_secrets(args.env)

    # Load .env relative to this script so it works regardless of CWD
    env_path = script_directory / "secrets" / f"env.{args.env}"
    if env_path.exists():
        load_dotenv(env_path, override=True)
    else:
        raise FileNotFoundError(f"Could not find an environment file for '{args.env}'. ")

    logging.basicConfig(level=args.log_level.upper())

    #This is the last thing to do because first we need the secrets imported
    from app import app
    uvicorn.run(app, host="0.0.0.0", port=args.port, log_level=args.log_level)
