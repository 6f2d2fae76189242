# kontrol_core/register.py
import os, socket
from typing import Optional
from urllib.parse import urlparse
import requests
from . import kitekey
from .errors import KiteKeyError, RegistrationError
from .logger import get_logger

log = get_logger("kontrol.register")

DEFAULT_REGSERV = "http://localhost:8080/regserv"


class Register:
    """
    Registers this host to a kite authority.

    POSTs the local hostname to <base_url>/register and stores the returned
    kite key on disk. The first failure aborts the flow, nothing is retried.
    """
    def __init__(self, base_url: Optional[str] = None, timeout: float = 5):
        self.base_url = (base_url or os.getenv("KONTROL_REGSERV_URL", DEFAULT_REGSERV)).rstrip("/")
        self.timeout = timeout

    def execute(self) -> str:
        try:
            kitekey.read()
            log.warning("Already registered. Registering again...")
        except KiteKeyError:
            pass

        hostname = socket.gethostname()
        parsed = urlparse(self.base_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise RegistrationError(f"invalid registration server url: {self.base_url!r}")

        url = f"{self.base_url}/register"
        log.info(f"[REGISTER] → {url} | hostname={hostname}")
        try:
            res = requests.post(url, json={"hostname": hostname}, timeout=self.timeout)
        except requests.RequestException as e:
            raise RegistrationError(f"cannot reach {url}: {e}") from e

        if not res.ok:
            log.error(f"[REGISTER] {res.status_code}: {res.text}")
            raise RegistrationError(f"registration refused: {res.status_code} {res.reason}", status=res.status_code)

        try:
            key = res.json().get("kiteKey")
        except (ValueError, AttributeError) as e:
            raise RegistrationError("malformed authority response") from e
        if not isinstance(key, str) or not key:
            raise RegistrationError("authority response carries no kite key")

        path = kitekey.write(key)
        log.info(f"[REGISTER] kite key written to {path}")
        return key
