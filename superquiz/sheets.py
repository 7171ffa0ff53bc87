"""Load quiz content from published Google Sheets (CSV export).

Every request carries a ``t=<millis>`` query parameter so neither the browser
nor Google's edge serves a stale copy. Nothing here raises past its own
boundary: question loads fall back to the built-in samples, config and
leaderboard loads fall back to an empty list.
"""
from __future__ import annotations

import logging
import re
import time
from dataclasses import replace

import httpx

from superquiz.models import LeaderboardEntry, Question, Topic, TopicConfig
from superquiz.parsers.config_parser import parse_leaderboard, parse_topic_configs
from superquiz.parsers.question_parser import ParseDiagnostics, parse_questions
from superquiz.sample_data import get_sample_questions

log = logging.getLogger("superquiz.sheets")

_GID = re.compile(r"[?&]gid=(\d+)")
_GID_PARAM = re.compile(r"gid=\d+")
_SHEET_ID = re.compile(r"/d/([a-zA-Z0-9_-]+)")


def build_csv_url_with_worksheet(base_url: str, worksheet_gid: str | None = None) -> str:
    """Point a sheet URL at one worksheet tab, in CSV form."""
    m = _GID.search(base_url)
    gid = worksheet_gid or (m.group(1) if m else None) or "0"

    if "/pub?" in base_url:
        if "gid=" in base_url:
            return _GID_PARAM.sub(f"gid={gid}", base_url, count=1)
        return f"{base_url}&gid={gid}&single=true&output=csv"
    if "/export" in base_url:
        if "gid=" in base_url:
            return _GID_PARAM.sub(f"gid={gid}", base_url, count=1)
        sep = "&" if "?" in base_url else "?"
        return f"{base_url}{sep}gid={gid}"
    if "/edit" in base_url:
        m = _SHEET_ID.search(base_url)
        if m:
            return f"https://docs.google.com/spreadsheets/d/{m.group(1)}/export?format=csv&gid={gid}"
    return base_url


def to_csv_url(sheet_url: str) -> str:
    if "/edit" in sheet_url:
        return sheet_url.replace("/edit#gid=0", "/export?format=csv").replace("/edit", "/export?format=csv")
    return sheet_url


def with_cache_buster(url: str, now: float | None = None) -> str:
    millis = int((time.time() if now is None else now) * 1000)
    sep = "&" if "?" in url else "?"
    return f"{url}{sep}t={millis}"


async def fetch_csv(
    url: str,
    client: httpx.AsyncClient | None = None,
    timeout: float | None = None,
) -> str:
    """GET ``url`` (cache-busted) and return the body.

    Raises httpx.HTTPError, or httpx.InvalidURL for a malformed link.
    """
    url = with_cache_buster(url)
    if client is not None:
        resp = await client.get(url)
        resp.raise_for_status()
        return resp.text
    async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as c:
        resp = await c.get(url)
        resp.raise_for_status()
        return resp.text


def resolve_topic(topic: Topic, configs: list[TopicConfig]) -> Topic:
    """Apply the master-sheet row for ``topic`` (matched by name), if it has a link."""
    config = next((c for c in configs if c.topic.lower() == topic.name.lower()), None)
    if config is None or not config.is_configured:
        return topic
    return replace(
        topic,
        sheet_url=config.link,
        worksheet_number=config.worksheet_number or topic.worksheet_number,
    )


async def fetch_questions(
    topic: Topic,
    client: httpx.AsyncClient | None = None,
    timeout: float | None = None,
) -> list[Question]:
    if topic.is_placeholder:
        log.warning("Sheet URL for %s is still a placeholder, using sample data", topic.name)
        return get_sample_questions(topic.id)

    csv_url = to_csv_url(topic.sheet_url)
    if topic.worksheet_gid:
        csv_url = build_csv_url_with_worksheet(csv_url, topic.worksheet_gid)

    worksheet_info = (
        f"filtering Worksheet No. {topic.worksheet_number}"
        if topic.worksheet_number else "all worksheets"
    )
    log.info("Loading %s from Google Sheet - %s", topic.name, worksheet_info)

    try:
        csv_text = await fetch_csv(csv_url, client=client, timeout=timeout)
        diagnostics = ParseDiagnostics()
        questions = parse_questions(csv_text, topic.id, topic.worksheet_number, diagnostics)
        if not questions:
            raise ValueError("No questions found in the sheet")
    except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
        log.error("Error fetching questions for %s: %s", topic.name, e)
        return get_sample_questions(topic.id)

    if diagnostics.unmatched_answers:
        log.warning(
            "%s: %d question(s) had an answer matching no option",
            topic.name, diagnostics.unmatched_answers,
        )
    log.info("Loaded %d questions for %s (%s)", len(questions), topic.name, worksheet_info)
    return questions


async def fetch_topic_config(
    master_url: str,
    client: httpx.AsyncClient | None = None,
    timeout: float | None = None,
) -> list[TopicConfig]:
    try:
        csv_text = await fetch_csv(master_url, client=client, timeout=timeout)
        configs = parse_topic_configs(csv_text)
    except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
        log.error("Error fetching topic config: %s", e)
        return []
    log.info("Loaded %d topic config rows", len(configs))
    return configs


async def fetch_leaderboard(
    master_url: str,
    client: httpx.AsyncClient | None = None,
    timeout: float | None = None,
) -> list[LeaderboardEntry]:
    try:
        csv_text = await fetch_csv(master_url, client=client, timeout=timeout)
        entries = parse_leaderboard(csv_text)
    except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
        log.error("Error fetching leaderboard: %s", e)
        return []
    log.info("Loaded %d leaderboard entries", len(entries))
    return entries
