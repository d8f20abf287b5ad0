"""Static catalog for agile (board, sprint, epic) fields."""

from __future__ import annotations

from datetime import UTC, datetime

from jirafields.catalog._builders import path, static_field
from jirafields.core.types import EntityType, FieldUsage, StaticSuggestionData

AGILE_FIELDS = (
    static_field(
        "board",
        "Board",
        "Agile board information",
        "object",
        [
            path("board.id", "Board ID", "number", "high"),
            path("board.name", "Board name", frequency="high"),
            path("board.type", "Board type (scrum or kanban)"),
            path("board.location.projectKey", "Key of the project the board belongs to"),
            path("board.location.projectName", "Name of the project the board belongs to"),
            path("board.self", "Board REST API URL", frequency="low"),
        ],
    ),
    static_field(
        "sprint",
        "Sprint",
        "Sprint information",
        "object",
        [
            path("sprint.id", "Sprint ID", "number", "high"),
            path("sprint.name", "Sprint name", frequency="high"),
            path("sprint.state", "Sprint state (future, active, closed)", frequency="high"),
            path("sprint.startDate", "Sprint start date"),
            path("sprint.endDate", "Sprint end date"),
            path("sprint.completeDate", "Sprint completion date", frequency="low"),
            path("sprint.goal", "Sprint goal"),
            path("sprint.originBoardId", "ID of the board the sprint was created on", "number", "low"),
        ],
        common_usage=[
            ["sprint.name", "sprint.state"],
            ["sprint.name", "sprint.startDate", "sprint.endDate"],
        ],
    ),
    static_field(
        "epic",
        "Epic",
        "Epic information",
        "object",
        [
            path("epic.id", "Epic ID", "number"),
            path("epic.key", "Epic issue key", frequency="high"),
            path("epic.name", "Epic name", frequency="high"),
            path("epic.summary", "Epic summary"),
            path("epic.done", "Epic done flag", "boolean"),
            path("epic.color.key", "Epic color key", frequency="low"),
        ],
    ),
    static_field(
        "name",
        "Name",
        "Name of the board or sprint",
        "string",
        [path("name", "Board or sprint name", frequency="high")],
    ),
    static_field(
        "state",
        "State",
        "Sprint state",
        "string",
        [path("state", "Sprint state (future, active, closed)", frequency="high")],
    ),
    static_field(
        "type",
        "Type",
        "Board type",
        "string",
        [path("type", "Board type (scrum or kanban)")],
    ),
    static_field(
        "startDate",
        "Start Date",
        "Sprint start date",
        "string",
        [path("startDate", "Sprint start date")],
    ),
    static_field(
        "endDate",
        "End Date",
        "Sprint end date",
        "string",
        [path("endDate", "Sprint end date")],
    ),
    static_field(
        "goal",
        "Goal",
        "Sprint goal",
        "string",
        [path("goal", "Sprint goal text", frequency="low")],
    ),
    static_field(
        "originBoardId",
        "Origin Board",
        "Board a sprint was created on",
        "string",
        [path("originBoardId", "Origin board ID", "number", "low")],
    ),
)

AGILE_SUGGESTIONS = StaticSuggestionData(
    entity_type=EntityType.AGILE,
    typo_corrections={
        "bord": "board",
        "borad": "board",
        "sprin": "sprint",
        "spint": "sprint",
        "epik": "epic",
        "stat": "state",
        "stae": "state",
        "status": "state",
        "nam": "name",
        "nme": "name",
        "typ": "type",
        "startdat": "startDate",
        "start": "startDate",
        "enddat": "endDate",
        "end": "endDate",
        "gol": "goal",
        "boardi": "originBoardId",
        "boardid": "originBoardId",
    },
    usage_statistics={
        "name": FieldUsage(frequency="high", availability=1.0),
        "state": FieldUsage(frequency="high", availability=0.9),
        "board": FieldUsage(frequency="high", availability=0.85),
        "sprint": FieldUsage(frequency="high", availability=0.8),
        "type": FieldUsage(frequency="medium", availability=0.6),
        "startDate": FieldUsage(frequency="medium", availability=0.55),
        "endDate": FieldUsage(frequency="medium", availability=0.55),
        "epic": FieldUsage(frequency="medium", availability=0.4),
        "goal": FieldUsage(frequency="low", availability=0.25),
        "originBoardId": FieldUsage(frequency="low", availability=0.5),
    },
    contextual_suggestions=[
        "name",
        "state",
        "startDate",
        "endDate",
        "board",
        "sprint",
        "goal",
        "type",
        "sprint.state",
        "board.name",
    ],
    last_analyzed=datetime(2026, 9, 1, tzinfo=UTC),
)
