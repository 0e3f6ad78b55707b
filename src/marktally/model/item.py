# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict, Union

Priority = Literal["highest", "high", "medium", "low", "lowest"]

ExtraValue = Union[str, int, float, bool]


class Item(TypedDict):
    id: str
    title: str
    content: str
    type: str
    tags: list[str]
    category_key: str
    theme: Optional[str]
    recurrence: str
    priority: Optional[Priority]
    icon: Optional[str]
    created_date: Optional[str]
    scheduled_date: Optional[str]
    start_date: Optional[str]
    due_date: Optional[str]
    done_date: Optional[str]
    cancelled_date: Optional[str]
    start_iso: Optional[str]
    end_iso: Optional[str]
    start_ms: Optional[int]
    end_ms: Optional[int]
    date: Optional[str]
    date_source: Optional[str]
    date_ms: Optional[int]
    period: Optional[str]
    period_count: Optional[int]
    rating: Optional[Union[int, float]]
    pintu: Optional[str]
    folder: str
    start_time: Optional[str]
    end_time: Optional[str]
    duration: Optional[Union[int, float]]
    header: Optional[str]
    filename: Optional[str]
    extra: dict[str, ExtraValue]


ITEM_FIELDS: tuple[str, ...] = tuple(Item.__annotations__)

# camelCase names used by saved rule configurations
FIELD_ALIASES: dict[str, str] = {
    "categoryKey": "category_key",
    "createdDate": "created_date",
    "scheduledDate": "scheduled_date",
    "startDate": "start_date",
    "dueDate": "due_date",
    "doneDate": "done_date",
    "cancelledDate": "cancelled_date",
    "startISO": "start_iso",
    "endISO": "end_iso",
    "startMs": "start_ms",
    "endMs": "end_ms",
    "dateSource": "date_source",
    "dateMs": "date_ms",
    "periodCount": "period_count",
    "startTime": "start_time",
    "endTime": "end_time",
    "file.basename": "filename",
}


def new_item(id: str, type: str, folder: str) -> Item:
    return Item(
        id=id,
        title="",
        content="",
        type=type,
        tags=[],
        category_key="",
        theme=None,
        recurrence="none",
        priority=None,
        icon=None,
        created_date=None,
        scheduled_date=None,
        start_date=None,
        due_date=None,
        done_date=None,
        cancelled_date=None,
        start_iso=None,
        end_iso=None,
        start_ms=None,
        end_ms=None,
        date=None,
        date_source=None,
        date_ms=None,
        period=None,
        period_count=None,
        rating=None,
        pintu=None,
        folder=folder,
        start_time=None,
        end_time=None,
        duration=None,
        header=None,
        filename=None,
        extra={},
    )
