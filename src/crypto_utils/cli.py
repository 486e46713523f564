"""Command line interface for computing digests, MACs and tokens."""

import json
import logging
from typing import Optional

import typer
from dotenv import load_dotenv

from crypto_utils.config.app_config import get_app_config
from crypto_utils.config.token_config import get_token_config
from crypto_utils.security import Claims, JWTError, SigningError, Token
from crypto_utils.sha import (
    Algorithm,
    AlgorithmMac,
    CryptographicHash,
    CryptographicMac,
    InvalidKeyError,
)

app = typer.Typer(help="Cryptography utilities: SHA digests, HMAC codes and JSON Web Tokens")

# Command groups
token_app = typer.Typer(help="Commands for issuing and decoding tokens")

app.add_typer(token_app, name="token")

SECRET_ENVVAR = "CRYPTO_UTILS_SECRET"


@app.callback()
def main() -> None:
    """crypto-utils CLI entry point."""
    load_dotenv()
    logging.basicConfig(level=get_app_config().log_level)


def _parse_algorithm(enum_cls, name: Optional[str], default):
    if name is None:
        return default
    try:
        return enum_cls.from_name(name)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--algorithm") from e


@app.command("hash")
def hash_command(
    text: str,
    algorithm: Optional[str] = typer.Option(
        None, "--algorithm", "-a", help="sha1, sha256 or sha512 (default: from config.yaml)"
    ),
) -> None:
    """
    Print the hex digest of TEXT.

    Example:
        crypto-utils hash "P@ssw0rd" --algorithm sha1
    """
    algo = _parse_algorithm(Algorithm, algorithm, get_app_config().default_digest_algorithm)
    digest = CryptographicHash.hash(algo, text.encode("utf-8"))
    typer.echo(digest.hex())


@app.command("hmac")
def hmac_command(
    text: str,
    secret: str = typer.Option(..., "--secret", "-s", envvar=SECRET_ENVVAR, help="HMAC secret"),
    algorithm: Optional[str] = typer.Option(
        None, "--algorithm", "-a", help="hmac-sha1, hmac-sha256 or hmac-sha512 (default: from config.yaml)"
    ),
) -> None:
    """
    Print the hex HMAC of TEXT.

    Example:
        crypto-utils hmac "input" --secret secret --algorithm hmac-sha1
    """
    algo = _parse_algorithm(AlgorithmMac, algorithm, get_app_config().default_mac_algorithm)
    try:
        mac = CryptographicMac.hash(algo, secret.encode("utf-8"), text.encode("utf-8"))
    except InvalidKeyError as e:
        typer.echo(f"Error: {e.error_code}: {e.message}", err=True)
        raise typer.Exit(code=1)
    typer.echo(mac.hex())


@token_app.command("issue")
def token_issue(
    subject: str,
    secret: str = typer.Option(..., "--secret", "-s", envvar=SECRET_ENVVAR, help="Signing secret"),
    hours: Optional[int] = typer.Option(
        None, "--hours", help="Token lifetime in hours; negative issues an expired token"
    ),
) -> None:
    """
    Print a signed token for SUBJECT.

    Example:
        crypto-utils token issue user_1234 --secret secret --hours 24
    """
    if hours is None:
        hours = get_token_config().default_lifetime_hours
    try:
        token = Token.new(secret.encode("utf-8"), Claims.new(subject, hours))
    except SigningError as e:
        typer.echo(f"Error: {e.error_code}: {e.message}", err=True)
        raise typer.Exit(code=1)
    typer.echo(token.encoded)


@token_app.command("decode")
def token_decode(
    token: str,
    secret: str = typer.Option(..., "--secret", "-s", envvar=SECRET_ENVVAR, help="Signing secret"),
) -> None:
    """
    Verify TOKEN and print its claims as JSON.

    Example:
        crypto-utils token decode eyJ0eXAiOiJKV1Qi... --secret secret
    """
    try:
        claims = Token.decode(secret.encode("utf-8"), token)
    except JWTError as e:
        typer.echo(f"Error: {e.error_code}: {e.message}", err=True)
        raise typer.Exit(code=1)
    typer.echo(json.dumps(claims.model_dump()))


if __name__ == "__main__":
    app()
