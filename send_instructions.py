import argparse
import json
import sys

import requests

from katas.utils.consts import DEFAULT_API_URL, REQUEST_TIMEOUT


def send_instructions(url, instructions, heading="N", x=0, y=0):
    """
    Posts an instruction string to the rover server and prints the reply.

    Args:
        url (str): Full URL of the execute endpoint,
                   e.g. 'http://localhost:5000/rover/execute'.
        instructions (str): Instruction string such as 'RFF'.
        heading (str): Starting heading, one of N, E, S, W.
        x, y (int): Starting coordinates.

    Returns:
        int: 0 on success, 1 if the server rejected the request or could
             not be reached.
    """
    payload = {"heading": heading, "x": x, "y": y, "instructions": instructions}

    try:
        response = requests.post(url, json=payload, timeout=REQUEST_TIMEOUT)
    except requests.RequestException as e:
        print(f"Error contacting rover server at {url}: {e}", file=sys.stderr)
        return 1

    try:
        body = response.json()
    except ValueError:
        body = {"detail": response.text}

    if not response.ok:
        print(f"Server returned {response.status_code}: {json.dumps(body.get('detail', body))}", file=sys.stderr)
        return 1

    print(json.dumps(body, indent=2))
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(description="Send an instruction string to the rover server.")
    parser.add_argument("instructions", help="Instruction string made of F, B, L, R, e.g. 'RFF'.")
    parser.add_argument("--heading", default="N", help="Starting heading (N, E, S or W).")
    parser.add_argument("--x", type=int, default=0, help="Starting x coordinate.")
    parser.add_argument("--y", type=int, default=0, help="Starting y coordinate.")
    parser.add_argument("--url", default=DEFAULT_API_URL, help="Execute endpoint URL.")

    args = parser.parse_args(argv)
    return send_instructions(args.url, args.instructions, args.heading, args.x, args.y)


if __name__ == '__main__':
    sys.exit(main())

# --- How to Run This Script ---
#
# Start the server first:
#    python3 main.py --port 5000
#
# Then:
#    python3 send_instructions.py RFF --heading N --x 5 --y 5
#
# prints the final heading/position and the path the rover took:
#    {"heading": "E", "x": 7, "y": 5, "path": [...]}
