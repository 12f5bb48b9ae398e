"""Player lookup keyed by client certificate fingerprint."""

import datetime as dt

from sqlmodel import Session, select

from .logging import get_logger
from .models import Player

logger = get_logger(__name__)


def get_or_create_player(session: Session, fingerprint: str) -> Player:
    """Return the player for a fingerprint, creating one on first visit."""
    player = session.exec(
        select(Player).where(Player.fingerprint == fingerprint)
    ).first()

    if player is None:
        player = Player(fingerprint=fingerprint)
        session.add(player)
        logger.info("player_created", fingerprint=fingerprint)
    else:
        player.last_seen = dt.datetime.now(dt.UTC)
        logger.debug("player_seen", fingerprint=fingerprint, player_id=player.id)

    session.commit()
    session.refresh(player)
    return player
