"""Representative matcher - ZIP lookup and vote card filtering."""

import re
from collections.abc import Iterable
from dataclasses import replace

from loguru import logger
from pydantic import ValidationError

from app.models.representatives import Representative, VoteCard
from app.models.voting import AggregatedVoteView
from app.repositories.upstream import UpstreamRepository
from congress_client import UpstreamError
from congress_client.representatives import RepresentativeSchema

ZIP_PATTERN = re.compile(r"^\d{5}$")


def is_valid_zip(zip_code: str | None) -> bool:
    return bool(zip_code) and ZIP_PATTERN.match(zip_code) is not None


def normalize_name(name: str) -> str:
    return name.strip().casefold()


def filter_cards(
    cards: Iterable[VoteCard | AggregatedVoteView],
    rep: Representative | None,
) -> list[VoteCard]:
    """Show only cards the representative voted on and highlight their entries.

    `rep=None` resets every card to visible with nothing highlighted. A card
    whose member data cannot be read is hidden.
    """
    cards = [c if isinstance(c, VoteCard) else VoteCard(view=c) for c in cards]

    if rep is None:
        return [replace(c, visible=True, filtered=False, highlighted=()) for c in cards]

    target = normalize_name(rep.last_name)
    result = []
    for card in cards:
        try:
            matches = tuple(i for i, m in enumerate(card.view.members) if normalize_name(m.last_name) == target)
        except (AttributeError, TypeError) as e:
            logger.warning("Hiding roll call {}: malformed member data ({})", card.view.roll_call_number, e)
            matches = ()

        if matches:
            result.append(replace(card, visible=True, filtered=True, highlighted=matches))
        else:
            result.append(replace(card, visible=False, filtered=False, highlighted=()))

    logger.info("Filtered for {}: {}/{} cards visible", rep.last_name, sum(c.visible for c in result), len(result))
    return result


class RepresentativeMatcher:
    """Resolves a ZIP code to its House representative."""

    def __init__(self, upstream: UpstreamRepository):
        self._upstream = upstream

    async def resolve(self, zip_code: str) -> Representative | None:
        """Representative for a 5-digit ZIP, or None when it cannot be found."""
        if not is_valid_zip(zip_code):
            logger.warning("Invalid ZIP: {!r}", zip_code)
            return None

        try:
            payload = await self._upstream.rep_lookup(zip_code)
        except UpstreamError as e:
            logger.warning("Representative lookup failed for {}: {}", zip_code, e)
            return None

        results = payload.get("results")
        if not isinstance(results, list) or not results:
            logger.info("No representative found for {}", zip_code)
            return None

        try:
            first = RepresentativeSchema.model_validate(results[0])
        except ValidationError as e:
            logger.warning("Malformed representative for {}: {}", zip_code, e)
            return None

        rep = Representative.from_name(first.name, state=first.state, district=first.district)
        if not rep.last_name:
            logger.warning("Representative without a name for {}", zip_code)
            return None
        return rep

    def filter(self, cards: Iterable[VoteCard | AggregatedVoteView], rep: Representative | None) -> list[VoteCard]:
        return filter_cards(cards, rep)
