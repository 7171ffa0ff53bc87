"""Parse the master config sheet into topic configs and leaderboard rows.

Columns: Topic, Link, Worksheet No, Tab Name, Difficulty,
         Leaderboard Name, Quizzes, Stars, Streaks

The master sheet is split on bare commas (no quote handling).
"""
from __future__ import annotations

from superquiz.models import LeaderboardEntry, TopicConfig
from superquiz.parsers.csv_line import iter_data_lines, parse_int, split_simple_line


def _count(text: str) -> int:
    return max(parse_int(text) or 0, 0)


def parse_topic_configs(csv_text: str) -> list[TopicConfig]:
    configs: list[TopicConfig] = []
    for _, line in iter_data_lines(csv_text):
        parts = split_simple_line(line)
        if len(parts) < 5:
            continue
        configs.append(TopicConfig(
            topic=parts[0],
            link=parts[1],
            worksheet_no=parts[2],
            tab_name=parts[3],
            difficulty=parts[4],
        ))
    return configs


def parse_leaderboard(csv_text: str) -> list[LeaderboardEntry]:
    entries: list[LeaderboardEntry] = []
    for _, line in iter_data_lines(csv_text):
        parts = split_simple_line(line)
        if len(parts) < 9 or not parts[5]:
            continue
        entries.append(LeaderboardEntry(
            name=parts[5],
            quizzes=_count(parts[6]),
            stars=_count(parts[7]),
            streaks=_count(parts[8]),
        ))
    return entries
