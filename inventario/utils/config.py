"""
Configuracion de la aplicacion desde variables de entorno
"""
import os
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from dotenv import load_dotenv

from inventario.utils.constants import INTERVALO_FEED_DEFAULT
from inventario.utils.exceptions import ConfigurationError

_VALORES_VERDADEROS = {"1", "true", "yes", "si", "on"}
_VALORES_FALSOS = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class AppConfig:
    """Configuracion del servidor y del feed en tiempo real"""
    port: int = 8051
    debug: bool = True
    feed_interval: float = INTERVALO_FEED_DEFAULT
    feed_seed: Optional[int] = None
    autoconnect: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = None) -> "AppConfig":
        """
        Construye la configuracion desde variables de entorno.

        Variables:
            PORT: Puerto HTTP (default 8051)
            FLASK_ENV: "development" activa modo debug
            INVENTARIO_FEED_INTERVAL: Segundos entre mutaciones del feed
            INVENTARIO_FEED_SEED: Semilla para el feed simulado (opcional)
            INVENTARIO_AUTOCONNECT: Conectar el feed al iniciar (default true)

        Sin environ explicito tambien lee un archivo .env del directorio actual.

        Raises:
            ConfigurationError: Si algun valor no es valido
        """
        if environ is None:
            # Variables de .env (si existe) sin pisar las del entorno
            load_dotenv()
        env = os.environ if environ is None else environ

        port = _leer_entero(env, "PORT", 8051)
        if not 0 < port < 65536:
            raise ConfigurationError(f"PORT fuera de rango: {port}")

        interval = _leer_float(env, "INVENTARIO_FEED_INTERVAL", INTERVALO_FEED_DEFAULT)
        if not interval > 0:
            raise ConfigurationError(f"INVENTARIO_FEED_INTERVAL debe ser > 0: {interval}")

        seed_raw = env.get("INVENTARIO_FEED_SEED")
        seed = _leer_entero(env, "INVENTARIO_FEED_SEED", 0) if seed_raw not in (None, "") else None

        return cls(
            port=port,
            debug=env.get("FLASK_ENV", "development") == "development",
            feed_interval=interval,
            feed_seed=seed,
            autoconnect=_leer_bool(env, "INVENTARIO_AUTOCONNECT", True),
        )

    def to_dict(self) -> Dict[str, object]:
        return {
            'port': self.port,
            'debug': self.debug,
            'feed_interval': self.feed_interval,
            'feed_seed': self.feed_seed,
            'autoconnect': self.autoconnect,
        }


def _leer_entero(env: Mapping[str, str], nombre: str, default: int) -> int:
    valor = env.get(nombre)
    if valor in (None, ""):
        return default
    try:
        return int(valor)
    except ValueError:
        raise ConfigurationError(f"{nombre} debe ser entero: {valor!r}")


def _leer_float(env: Mapping[str, str], nombre: str, default: float) -> float:
    valor = env.get(nombre)
    if valor in (None, ""):
        return default
    try:
        return float(valor)
    except ValueError:
        raise ConfigurationError(f"{nombre} debe ser numerico: {valor!r}")


def _leer_bool(env: Mapping[str, str], nombre: str, default: bool) -> bool:
    valor = env.get(nombre)
    if valor in (None, ""):
        return default
    normalizado = valor.strip().lower()
    if normalizado in _VALORES_VERDADEROS:
        return True
    if normalizado in _VALORES_FALSOS:
        return False
    raise ConfigurationError(f"{nombre} debe ser booleano: {valor!r}")
