from enum import Enum


PROVIDER = "twitter"
STRATEGY_NAME = "twitter-token"

REQUEST_TOKEN_URL = "https://api.twitter.com/oauth/request_token"
ACCESS_TOKEN_URL = "https://api.twitter.com/oauth/access_token"
USER_AUTHORIZATION_URL = "https://api.twitter.com/oauth/authenticate"
PROFILE_URL = "https://api.twitter.com/1.1/users/show.json"
SESSION_KEY = "oauth:twitter"

TOKEN_FIELD = "oauth_token"
TOKEN_SECRET_FIELD = "oauth_token_secret"
USER_ID_FIELD = "user_id"

# Twitter sends users back with ?denied=<request token> when they refuse access
DENIED_QUERY_PARAM = "denied"


class OutcomeKind(Enum):
    SUCCESS = "success"
    FAIL = "fail"
    ERROR = "error"
