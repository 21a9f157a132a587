"""Stand-in for the fabric CLI used by the test suite.

Behaviour is keyed off the arguments and a few FAKE_FABRIC_* environment
variables. Every invocation is appended to $FAKE_FABRIC_LOG as a JSON list.
"""

import json
import os
import sys
import time


def main(args):
    log_path = os.environ.get("FAKE_FABRIC_LOG")
    if log_path:
        with open(log_path, "a", encoding="utf-8") as log:
            log.write(json.dumps(args) + "\n")

    def value(flag):
        if flag in args:
            return args[args.index(flag) + 1]
        return ""

    if "--listpatterns" in args:
        if os.environ.get("FAKE_FABRIC_LIST_FAIL"):
            sys.stderr.write("listing broken\n")
            return 2
        print(os.environ.get("FAKE_FABRIC_PATTERNS", "").replace(",", "\n"))
        return 0
    if "--listmodels" in args:
        print("gpt-4o\nclaude-3-opus")
        return 0
    if "--update" in args:
        sys.stderr.write("warning: using cached mirror\n")
        print("Patterns updated")
        return 0

    pattern = value("--pattern")
    model = value("--model")
    if "--help" in args:
        if pattern == "unknown":
            return 1
        print("Usage: fabric [OPTIONS]")
        return 0
    if "-u" in args:
        print(f"url={value('-u')} pattern={pattern} model={model}")
        return 0
    if "-y" in args:
        print(f"youtube={value('-y')} pattern={pattern} model={model}")
        return 0

    if pattern == "fail":
        sys.stderr.write("error: pattern not found\n")
        return 1
    if pattern.startswith("slow"):
        time.sleep(float(os.environ.get("FAKE_FABRIC_SLEEP", "0.5")))
    if pattern == "noisy":
        sys.stderr.write("note: using default model\n")
    text = sys.stdin.read()
    print(f"[{pattern}] {text}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
