"""Django signals for cache invalidation."""

import logging

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from exhibitions.cache import invalidate_public_cache
from exhibitions.models import ArDesign, Exhibition, ExhibitionInformation

logger = logging.getLogger(__name__)


@receiver([post_save, post_delete], sender=Exhibition)
def invalidate_exhibition_cache(sender, instance, **kwargs):
    """Invalidate public caches when an exhibition is saved or deleted."""
    logger.debug("Exhibition %s changed; invalidating public cache", instance.pk)
    invalidate_public_cache()


@receiver([post_save, post_delete], sender=ExhibitionInformation)
def invalidate_information_cache(sender, instance, **kwargs):
    """Invalidate public caches when exhibition information is saved or deleted."""
    invalidate_public_cache()


@receiver([post_save, post_delete], sender=ArDesign)
def invalidate_ar_design_cache(sender, instance, **kwargs):
    """Invalidate public caches when an AR design is saved or deleted."""
    invalidate_public_cache()
