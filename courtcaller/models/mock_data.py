"""Mock tournament data for demo mode and the local match endpoint."""

from datetime import datetime, timezone
from typing import Any

from .match import Match, MatchStatus

# Rows shaped exactly like the published sheet feed
MOCK_SHEET_ROWS: list[dict[str, Any]] = [
    {"Match": "1", "Player A": "Chen Wei", "Player B": "Viktor Lind", "Score": "21-18, 21-15", "Winner": "Chen Wei", "Status": "past"},
    {"Match": "2", "Player A": "Carla Marin", "Player B": "Tai Ying", "Score": "19-21, 21-16, 21-18", "Winner": "Tai Ying", "Status": "past"},
    {"Match": "3", "Player A": "Marcus Gid", "Player B": "Kevin Suk", "Score": "21-15, 21-12", "Winner": "Marcus Gid", "Status": "past"},
    {"Match": "4", "Player A": "Grey Polii", "Player B": "Apri Rahayu", "Score": "21-12, 21-16", "Winner": "Grey Polii", "Status": "past"},
    {"Match": "5", "Player A": "Zheng Si", "Player B": "Huang Ya", "Score": "", "Winner": "", "Status": "next"},
    {"Match": "6", "Player A": "Kento Mo", "Player B": "Anders Ant", "Score": "", "Winner": "", "Status": "next"},
    {"Match": "7", "Player A": "Akane Yama", "Player B": "An Seyoung", "Score": "", "Winner": "", "Status": "next"},
    {"Match": "8", "Player A": "Mo Ahsan", "Player B": "Hendra Seti", "Score": "", "Winner": "", "Status": "next", "Category": "U 13"},
    {"Match": "9", "Player A": "Lee Zii", "Player B": "Chou Tien", "Score": "", "Winner": "", "Status": "next"},
    {"Match": "10", "Player A": "", "Player B": "", "Score": "", "Winner": "", "Status": "next"},
    {"Match": "Break", "Player A": "", "Player B": "", "Score": "", "Winner": "", "Status": ""},
]


def _utc(hour: int, minute: int) -> datetime:
    return datetime(2025, 10, 12, hour, minute, tzinfo=timezone.utc)


def _match(match_id: str, number: int, p1: str, p2: str, category: str, round_name: str, status: MatchStatus, **kwargs: Any) -> Match:
    return Match(
        id=match_id,
        match_number=number,
        player1=p1,
        player2=p2,
        category=category,
        round=round_name,
        status=status,
        **kwargs,
    )


# Fixture schedule served by the /api/matches endpoint
SAMPLE_MATCHES: list[Match] = [
    _match("1", 15, "Chen Wei Ming", "Viktor Axelsen", "13+", "Singles Final", MatchStatus.COMPLETED, score="21-18, 21-15", winner="Chen Wei Ming", end_time=_utc(14, 30)),
    _match("2", 14, "Carolina Marin", "Tai Tzu-ying", "13+", "Singles Semi", MatchStatus.COMPLETED, score="19-21, 21-16, 21-18", winner="Tai Tzu-ying", end_time=_utc(13, 45)),
    _match("3", 13, "Marcus Gideon", "Kevin Sukamuljo", "u13", "Doubles Quarter", MatchStatus.COMPLETED, score="21-15, 21-12", winner="Marcus Gideon", end_time=_utc(13, 0)),
    _match("4", 12, "Greysia Polii", "Apriyani Rahayu", "u11", "Doubles Semi", MatchStatus.COMPLETED, score="21-12, 21-16", winner="Greysia Polii", end_time=_utc(12, 15)),
    _match("5", 11, "Zheng Siwei", "Huang Yaqiong", "u9", "Mixed Doubles Final", MatchStatus.COMPLETED, score="18-21, 21-19, 21-16", winner="Huang Yaqiong", end_time=_utc(11, 30)),
    _match("6", 16, "Kento Momota", "Anders Antonsen", "13+", "Singles Final", MatchStatus.LIVE, score="15-12, 8-11", start_time=_utc(15, 0)),
    _match("7", 17, "Akane Yamaguchi", "An Se-young", "13+", "Singles Final", MatchStatus.LIVE, score="21-18, 12-15", start_time=_utc(15, 30)),
    _match("8", 18, "Mohammad Ahsan", "Hendra Setiawan", "u13", "Doubles Final", MatchStatus.UPCOMING, start_time=_utc(16, 0)),
    _match("9", 19, "Chen Qingchen", "Jia Yifan", "u13", "Doubles Final", MatchStatus.UPCOMING, start_time=_utc(16, 30)),
    _match("10", 20, "Dechapol Puavaranukroh", "Sapsiree Taerattanachai", "u11", "Mixed Doubles Final", MatchStatus.UPCOMING, start_time=_utc(17, 0)),
    _match("11", 21, "Lee Zii Jia", "Chou Tien-chen", "u11", "Singles Semi", MatchStatus.UPCOMING, start_time=_utc(17, 30)),
    _match("12", 22, "Pusarla Sindhu", "Nozomi Okuhara", "u9", "Singles Semi", MatchStatus.UPCOMING, start_time=_utc(18, 0)),
    _match("13", 23, "Fajar Alfian", "Muhammad Rian Ardianto", "u9", "Doubles Semi", MatchStatus.UPCOMING, start_time=_utc(18, 30)),
    _match("14", 24, "Kim So-yeong", "Kong Hee-yong", "13+", "Doubles Semi", MatchStatus.UPCOMING, start_time=_utc(19, 0)),
    _match("15", 25, "Wang Yilyu", "Huang Dongping", "u13", "Mixed Doubles Semi", MatchStatus.UPCOMING, start_time=_utc(19, 30)),
]
