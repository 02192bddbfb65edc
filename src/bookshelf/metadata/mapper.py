# ABOUTME: Projects a fetched catalog volume into the destination MetadataRecord shape.
# ABOUTME: Field failures are logged and the field left unset; mapping itself never fails.

import logging

from bookshelf.metadata.matching import published_year
from bookshelf.metadata.types import DetailRecord, MetadataRecord

logger = logging.getLogger(__name__)

# The catalog rates out of five, the destination out of ten.
_RATING_SCALE = 2


def map_detail(detail: DetailRecord) -> MetadataRecord:
    """Build a MetadataRecord from a DetailRecord.

    An unparsable published date is reported through the module logger and
    leaves production_year as None.
    """
    record = MetadataRecord(name=detail.title, overview=detail.description)

    year = published_year(detail.published_date)
    if year is None:
        logger.error(
            "Error parsing date %r for volume %s", detail.published_date, detail.id
        )
    record.production_year = year

    if detail.publisher:
        record.studios.add(detail.publisher)

    if detail.main_category:
        record.tags.add(detail.main_category)
    record.tags.update(detail.categories)

    if detail.average_rating is not None:
        record.community_rating = detail.average_rating * _RATING_SCALE

    if detail.id:
        record.external_id = detail.id

    record.image_url = detail.image_url
    return record
