"""
Send a question or a ticket request to a running backend and print the reply.
Usage:
  python scripts/test/ask_assistant.py "Which route earns the most?"
  python scripts/test/ask_assistant.py --conductor 1 --route 12 "book ticket for 2 adults to Airport"
"""

import argparse
import json
import requests

DEFAULT_URL = "http://localhost:5000"


def main():
    parser = argparse.ArgumentParser(description="Talk to the Conductor Assist assistant")
    parser.add_argument("text", help="Question or ticket request")
    parser.add_argument("--url", default=DEFAULT_URL)
    parser.add_argument("--conductor", type=int, help="Conductor id (enables history and ticket generation)")
    parser.add_argument("--route", help="Conductor's assigned route number")
    args = parser.parse_args()

    if args.conductor:
        endpoint = f"{args.url}/api/chat/conversation"
        payload = {
            "messages": [{"role": "user", "content": args.text}],
            "conductorId": args.conductor,
            "conductorRoute": args.route,
        }
    else:
        endpoint = f"{args.url}/api/chat"
        payload = {"question": args.text}

    print(f"📤 POST {endpoint}")
    try:
        resp = requests.post(endpoint, json=payload, timeout=90)
    except requests.exceptions.ConnectionError:
        print(f"❌ Cannot reach {args.url} — is the backend running?")
        return

    body = resp.json()
    print(f"📥 HTTP {resp.status_code}")
    if body.get("answer"):
        print(body["answer"])
    print(json.dumps({k: v for k, v in body.items() if k != "answer"}, indent=2))


if __name__ == "__main__":
    main()
