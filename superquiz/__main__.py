"""CLI entry point for superquiz.

Usage:
  python -m superquiz serve [--port PORT] [--host HOST]
  python -m superquiz stop
  python -m superquiz status
  python -m superquiz topics
  python -m superquiz questions TOPIC_ID
  python -m superquiz leaderboard
"""
from __future__ import annotations

import asyncio
import os
import signal
import sys
from pathlib import Path

PID_FILE = Path(__file__).resolve().parent.parent / ".server.pid"


def main():
    args = sys.argv[1:]
    command = args[0] if args else "serve"

    if command == "serve":
        _serve(args[1:])
    elif command == "stop":
        _stop()
    elif command == "status":
        _status()
    elif command == "topics":
        _topics()
    elif command == "questions":
        _questions(args[1:])
    elif command == "leaderboard":
        _leaderboard()
    else:
        print(f"Unknown command: {command}")
        print("Commands: serve, stop, status, topics, questions, leaderboard")
        sys.exit(1)


def _parse_flag(args: list[str], name: str, default: str) -> str:
    for i, a in enumerate(args):
        if a == name and i + 1 < len(args):
            return args[i + 1]
    return default


def _read_pid() -> int | None:
    """Read PID from file, return None if stale or missing."""
    if not PID_FILE.exists():
        return None
    try:
        pid = int(PID_FILE.read_text().strip())
        os.kill(pid, 0)
        return pid
    except (ValueError, ProcessLookupError, PermissionError):
        PID_FILE.unlink(missing_ok=True)
        return None


def _stop() -> bool:
    pid = _read_pid()
    if pid is None:
        print("Server is not running.")
        return False
    try:
        os.kill(pid, signal.SIGTERM)
        print(f"Stopped server (PID {pid}).")
        return True
    except ProcessLookupError:
        print("Server was not running (stale PID file removed).")
        return False
    finally:
        PID_FILE.unlink(missing_ok=True)


def _status():
    pid = _read_pid()
    if pid is None:
        print("Server is not running.")
    else:
        print(f"Server is running (PID {pid}).")


def _serve(args: list[str]):
    import uvicorn

    existing = _read_pid()
    if existing is not None:
        print(f"Server already running (PID {existing}). Use 'stop' first.")
        sys.exit(1)

    port = int(_parse_flag(args, "--port", "8766"))
    host = _parse_flag(args, "--host", "127.0.0.1")
    PID_FILE.write_text(str(os.getpid()))

    print(f"Starting SuperQuiz on http://{host}:{port}")
    print("Press Ctrl+C to stop\n")
    try:
        uvicorn.run("superquiz.app:app", host=host, port=port, reload=False)
    finally:
        PID_FILE.unlink(missing_ok=True)


def _topics():
    from superquiz.config import load_settings
    from superquiz.sample_data import TOPICS
    from superquiz.sheets import fetch_topic_config, resolve_topic

    settings = load_settings()
    configs = asyncio.run(fetch_topic_config(settings.master_config_url, timeout=settings.fetch_timeout))
    print(f"{len(configs)} row(s) in master config\n")
    for topic in TOPICS:
        t = resolve_topic(topic, configs)
        source = "sample data" if t.is_placeholder else t.sheet_url
        print(f"  {t.icon} {t.name:12s} [{t.id}] worksheet {t.worksheet_number}  {source}")


def _questions(args: list[str]):
    if not args:
        print("Usage: python -m superquiz questions TOPIC_ID")
        sys.exit(1)

    from superquiz.config import load_settings
    from superquiz.sample_data import get_topic
    from superquiz.sheets import fetch_questions, fetch_topic_config, resolve_topic

    topic = get_topic(args[0])
    if topic is None:
        print(f"Unknown topic: {args[0]}")
        sys.exit(1)

    settings = load_settings()

    async def _load():
        configs = await fetch_topic_config(settings.master_config_url, timeout=settings.fetch_timeout)
        return await fetch_questions(resolve_topic(topic, configs), timeout=settings.fetch_timeout)

    questions = asyncio.run(_load())
    for q in questions:
        print(f"{q.id}: {q.text}")
        for a in q.answers:
            mark = "*" if a.id == q.correct_answer else " "
            print(f"   {mark} {a.id}) {a.text}")
    print(f"\n{len(questions)} question(s)")


def _leaderboard():
    from superquiz.config import load_settings
    from superquiz.sheets import fetch_leaderboard

    settings = load_settings()
    entries = asyncio.run(fetch_leaderboard(settings.master_config_url, timeout=settings.fetch_timeout))
    if not entries:
        print("No leaderboard entries.")
        return
    entries.sort(key=lambda e: e.stars, reverse=True)
    print(f"{'Name':20s} {'Quizzes':>8s} {'Stars':>6s} {'Streaks':>8s}")
    print("=" * 45)
    for e in entries:
        print(f"{e.name:20s} {e.quizzes:8d} {e.stars:6d} {e.streaks:8d}")


if __name__ == "__main__":
    main()
