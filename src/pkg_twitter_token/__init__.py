"""
pkg_twitter_token

Twitter "token" authentication strategy: takes an OAuth 1.0a access token
the client already holds, loads the matching Twitter profile and lets the
application decide whether to admit the user.
"""

__version__ = "0.1.0"

from .domain.entities import AuthRequest, Credentials, Profile, ProfileName
from .domain.constants import OutcomeKind
from .domain.outcomes import Success, Fail, Error, Outcome
from .domain.exceptions import (
    TokenAuthError,
    ConfigurationError,
    InternalOAuthError,
)
from .domain.value_objects import CredentialFields, ProfileValue
from .domain.ports import SignedClient, ProfileNormalizer, VerifyCallback

from .config import TokenStrategySettings, settings_from_env

from .application.strategy import OAuthStrategy
from .application.use_cases.authenticate import TwitterTokenStrategy
from .application.use_cases.normalize import TwitterProfileNormalizer

# httpx + Authlib signing client (optional to re-export)
from .adapters.twitter.oauth_client import OAuth1SignedClient
from .integrations.common.auth_factory import create_twitter_token_strategy

__all__ = [
    "__version__",
    # domain core
    "AuthRequest",
    "Credentials",
    "Profile",
    "ProfileName",
    "ProfileValue",
    "CredentialFields",
    "OutcomeKind",
    "Success",
    "Fail",
    "Error",
    "Outcome",
    "SignedClient",
    "ProfileNormalizer",
    "VerifyCallback",
    # exceptions
    "TokenAuthError",
    "ConfigurationError",
    "InternalOAuthError",
    # config
    "TokenStrategySettings",
    "settings_from_env",
    # strategies
    "OAuthStrategy",
    "TwitterTokenStrategy",
    "TwitterProfileNormalizer",
    # adapters / factories
    "OAuth1SignedClient",
    "create_twitter_token_strategy",
]
