"""Builds transform callbacks from configuration."""

from recast.config import TransformConfig
from recast.domain.index.model.subscription import TransformCallback
from recast.domain.index.port.content_store import ContentStore
from recast.domain.index.transform.base import fail_open
from recast.domain.index.transform.breadcrumb import BreadcrumbTransform
from recast.domain.index.transform.composite import CombinedFieldTransform
from recast.domain.index.transform.search_path import SearchPathTransform
from recast.domain.shared.error import ConfigurationError

TRANSFORM_KINDS = ("combined", "search_path", "breadcrumb")


def build_transform(
    config: TransformConfig, content_store: ContentStore | None = None
) -> TransformCallback:
    """Create the callback described by ``config``.

    Raises:
        ConfigurationError: For unknown kinds or invalid options.
    """
    selection = {"categories": config.categories, "item_types": config.item_types}

    try:
        if config.kind == "combined":
            callback: TransformCallback = CombinedFieldTransform(**selection, **config.options)
        elif config.kind == "search_path":
            callback = SearchPathTransform(**selection, **config.options)
        elif config.kind == "breadcrumb":
            if content_store is None:
                raise ConfigurationError("Breadcrumb transform requires a content store")
            callback = BreadcrumbTransform(content_store, **selection, **config.options)
        else:
            raise ConfigurationError(
                f"Unknown transform kind '{config.kind}' "
                f"(expected one of {', '.join(TRANSFORM_KINDS)})"
            )
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid options for '{config.kind}' transform: {e}") from e

    if config.fail_open:
        callback = fail_open(callback)
    return callback
