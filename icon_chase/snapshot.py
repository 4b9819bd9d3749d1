"""Read-only render snapshots.

Renderers and front ends should not dig through component maps. After each
tick they receive a :class:`Snapshot`: plain frozen records describing where
every body is drawn, which icons remain, and the score and phase. The
``snapshot_dict`` form is JSON friendly and is what the Gymnasium wrapper
exposes as ``info``.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from icon_chase.actions import Direction
from icon_chase.state import State
from icon_chase.types import EntityID, Phase, PixelCoord


@dataclass(frozen=True)
class BodyView:
    id: EntityID
    pixel: PixelCoord
    cell: Tuple[int, int]
    moving: bool


@dataclass(frozen=True)
class PlayerView(BodyView):
    facing: Direction = Direction.RIGHT


@dataclass(frozen=True)
class IconView:
    id: EntityID
    cell: Tuple[int, int]
    pixel: PixelCoord
    kind: str
    collected: bool


@dataclass(frozen=True)
class Snapshot:
    """Everything a renderer needs for one frame."""

    player: Optional[PlayerView]
    baddies: Tuple[BodyView, ...]
    icons: Tuple[IconView, ...]
    score: int
    phase: Phase
    tick: int
    message: Optional[str] = None


def _body(state: State, eid: EntityID) -> Tuple[PixelCoord, Tuple[int, int], bool]:
    pixel = state.pixel[eid]
    pos = state.position[eid]
    return (pixel.x, pixel.y), (pos.x, pos.y), state.motion[eid].moving


def snapshot(state: State) -> Snapshot:
    """Project ``state`` onto a :class:`Snapshot`."""
    player: Optional[PlayerView] = None
    agent_id = state.agent_id
    if agent_id is not None and agent_id in state.pixel:
        pixel, cell, moving = _body(state, agent_id)
        player = PlayerView(
            id=agent_id,
            pixel=pixel,
            cell=cell,
            moving=moving,
            facing=state.agent[agent_id].facing,
        )

    baddies = tuple(
        BodyView(eid, *_body(state, eid))
        for eid in sorted(state.pursuit.keys())
        if eid in state.pixel
    )

    icons = tuple(
        IconView(
            id=eid,
            cell=(state.position[eid].x, state.position[eid].y),
            pixel=state.grid.to_pixel(state.position[eid].x, state.position[eid].y),
            kind=state.icon[eid].kind if eid in state.icon else "",
            collected=collectible.collected,
        )
        for eid, collectible in sorted(state.collectible.items())
        if eid in state.position
    )

    return Snapshot(
        player=player,
        baddies=baddies,
        icons=icons,
        score=state.score,
        phase=state.phase,
        tick=state.tick,
        message=state.message,
    )


def snapshot_dict(state: State) -> Dict[str, Any]:
    """JSON-friendly snapshot (lists instead of tuples, enum values as strings)."""
    snap = snapshot(state)

    def body(view: BodyView) -> Dict[str, Any]:
        return {
            "id": int(view.id),
            "x": float(view.pixel[0]),
            "y": float(view.pixel[1]),
            "col": view.cell[0],
            "row": view.cell[1],
            "moving": view.moving,
        }

    player: Optional[Dict[str, Any]] = None
    if snap.player is not None:
        player = {**body(snap.player), "facing": str(snap.player.facing)}

    return {
        "player": player,
        "baddies": [body(b) for b in snap.baddies],
        "icons": [
            {
                "id": int(i.id),
                "col": i.cell[0],
                "row": i.cell[1],
                "kind": i.kind,
                "collected": i.collected,
            }
            for i in snap.icons
        ],
        "score": int(snap.score),
        "phase": str(snap.phase),
        "tick": int(snap.tick),
    }
