from __future__ import annotations

from importlib import metadata


def tool_version() -> str:
    """
    Версия установленного дистрибутива pojito.

    Returns:
        Строка версии или "0.0.0", если пакет запущен из исходников без установки
    """
    try:
        return metadata.version("pojito")
    except metadata.PackageNotFoundError:
        return "0.0.0"


__all__ = ["tool_version"]
