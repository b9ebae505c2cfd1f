"""Config Resolver - merge job-level overrides with global defaults."""

from typing import Optional, TypeVar

from .config import EffectiveTarget, GlobalConfig, NotifierConfig

T = TypeVar('T')


def merge(override: Optional[T], default: Optional[T]) -> Optional[T]:
    """Return the override when it is set, otherwise the default."""
    return override if override is not None else default


def resolve(job_config: NotifierConfig, global_config: GlobalConfig) -> EffectiveTarget:
    """
    Compute the effective target for one notification.

    Token and room may be overridden per job; the server always comes
    from the global config.
    """
    return EffectiveTarget(
        server=global_config.server,
        token=merge(job_config.token, global_config.token),
        room=merge(job_config.room, global_config.room),
    )


def dispatch_allowed(target: EffectiveTarget) -> bool:
    """Check that the target has both a token and a room."""
    return bool(target.token) and bool(target.room)
