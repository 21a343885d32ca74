"""Layered configuration for graphql-authz."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "AuthzConfig",
    "configure",
    "get_global_config",
    "_reset_global_config",
    "_set_global_config",
]


@dataclass(frozen=True, slots=True)
class AuthzConfig:
    """Layered configuration with merge semantics (global -> build).

    A snapshot of the effective config is taken when a schema is
    transformed; changing the global config afterwards does not affect
    guards that are already installed.

    Attributes:
        identity_key: Key (for mapping contexts) or attribute (for object
            contexts) under which the request context carries the caller
            identity.
        subject_claims: Claim names tried, in order, to read the subject
            from the identity. ``"sub"`` is what JWT-style signers emit.
        log_decisions: Emit an audit log line for every guard decision.
        identity_header: HTTP header the FastAPI integration parses the
            upstream identity assertion from.

    Example::

        config = AuthzConfig(identity_key="viewer")
        merged = config.merge(log_decisions=True)
    """

    identity_key: str = "user"
    subject_claims: tuple[str, ...] = ("subject", "sub")
    log_decisions: bool = False
    identity_header: str = "user"

    def __post_init__(self) -> None:
        if not isinstance(self.identity_key, str) or not self.identity_key:
            raise ValueError(f"identity_key must be a non-empty string, got {self.identity_key!r}")
        if isinstance(self.subject_claims, str):
            # A bare string would be iterated character by character.
            raise ValueError(
                f"subject_claims must be a tuple of claim names, got {self.subject_claims!r}"
            )
        claims = tuple(self.subject_claims)
        if not claims or not all(isinstance(c, str) and c for c in claims):
            raise ValueError(
                f"subject_claims must contain at least one non-empty string, "
                f"got {self.subject_claims!r}"
            )
        # Use object.__setattr__ because the dataclass is frozen
        object.__setattr__(self, "subject_claims", claims)
        if not isinstance(self.identity_header, str) or not self.identity_header:
            raise ValueError(
                f"identity_header must be a non-empty string, got {self.identity_header!r}"
            )

    def merge(
        self,
        *,
        identity_key: str | None = None,
        subject_claims: tuple[str, ...] | None = None,
        log_decisions: bool | None = None,
        identity_header: str | None = None,
    ) -> AuthzConfig:
        """Return a new config with non-None overrides applied.

        Args:
            identity_key: Override for identity_key (ignored if None).
            subject_claims: Override for subject_claims (ignored if None).
            log_decisions: Override for log_decisions (ignored if None).
            identity_header: Override for identity_header (ignored if None).

        Returns:
            A new ``AuthzConfig`` with overrides merged.

        Example::

            base = AuthzConfig()
            build_cfg = base.merge(subject_claims=("sub",))
        """
        return AuthzConfig(
            identity_key=identity_key if identity_key is not None else self.identity_key,
            subject_claims=(
                subject_claims if subject_claims is not None else self.subject_claims
            ),
            log_decisions=log_decisions if log_decisions is not None else self.log_decisions,
            identity_header=(
                identity_header if identity_header is not None else self.identity_header
            ),
        )


# ---------------------------------------------------------------------------
# Global configuration singleton
# ---------------------------------------------------------------------------

_global_config = AuthzConfig()


def get_global_config() -> AuthzConfig:
    """Return the current global configuration.

    Example::

        config = get_global_config()
        print(config.identity_key)  # "user"
    """
    return _global_config


def configure(
    *,
    identity_key: str | None = None,
    subject_claims: tuple[str, ...] | None = None,
    log_decisions: bool | None = None,
    identity_header: str | None = None,
) -> AuthzConfig:
    """Update the global configuration by merging overrides.

    Only non-None values are applied. Returns the new global config.
    Call this before building the schema: guards snapshot the config
    that is in effect when they are installed.

    Args:
        identity_key: Context key/attribute holding the caller identity.
        subject_claims: Claim names tried in order to read the subject.
        log_decisions: Enable/disable audit logging of guard decisions.
        identity_header: Header parsed by the FastAPI integration.

    Returns:
        The updated global ``AuthzConfig``.

    Example::

        configure(log_decisions=True)
    """
    global _global_config
    _global_config = _global_config.merge(
        identity_key=identity_key,
        subject_claims=subject_claims,
        log_decisions=log_decisions,
        identity_header=identity_header,
    )
    return _global_config


def _set_global_config(cfg: AuthzConfig) -> None:
    """Replace global config with an exact snapshot. For testing only."""
    global _global_config
    _global_config = cfg


def _reset_global_config() -> None:
    """Reset global config to defaults. For testing only."""
    global _global_config
    _global_config = AuthzConfig()
