"""Side effects that follow a primary write.

Each effect is a plain description of work. The dispatcher executes it and,
when it fails, stores the serialized effect in the outbox for replay.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import Field, TypeAdapter

from loop.domain.model.common import DomainModel
from loop.domain.value import CounterName, LoopId, NotificationType, UserId


class AdjustCounter(DomainModel):
    """Move one loop counter by +1 or -1 (or by the number of removed rows)."""

    kind: Literal["adjust_counter"] = "adjust_counter"
    loop_id: LoopId
    counter: CounterName
    delta: int


class Notify(DomainModel):
    """Write a single notification."""

    kind: Literal["notify"] = "notify"
    recipient_id: UserId
    type: NotificationType
    title: str
    message: str
    data: dict[str, Any] = Field(default_factory=dict)


class NotifyMany(DomainModel):
    """Write the same notification to many recipients in one batch."""

    kind: Literal["notify_many"] = "notify_many"
    recipient_ids: list[UserId]
    type: NotificationType
    title: str
    message: str
    data: dict[str, Any] = Field(default_factory=dict)


class Broadcast(DomainModel):
    """Publish an event to a real-time room."""

    kind: Literal["broadcast"] = "broadcast"
    room: str
    event: str
    payload: dict[str, Any] = Field(default_factory=dict)


SideEffect = Annotated[
    Union[AdjustCounter, Notify, NotifyMany, Broadcast],
    Field(discriminator="kind"),
]

side_effect_adapter: TypeAdapter[SideEffect] = TypeAdapter(SideEffect)
