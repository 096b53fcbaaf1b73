"""RS256 id_token verification for relying parties."""

import jwt
from jwt.types import Options

from idp.crypto.keys import SIGNING_ALGORITHM
from idp.crypto.types import DecodedIdToken


def verify_id_token(
    token: str,
    public_key_pem: str,
    issuer: str,
    audience: str | None = None,
) -> DecodedIdToken:
    """Verify and decode an RS256 id_token."""
    opts: Options = {"require": ["exp", "iat", "iss", "sub"]}
    if audience is None:
        opts["verify_aud"] = False
    raw = jwt.decode(
        token,
        public_key_pem,
        algorithms=[SIGNING_ALGORITHM],
        issuer=issuer,
        audience=audience,
        options=opts,
    )
    return DecodedIdToken.model_validate(raw)
