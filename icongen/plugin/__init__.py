"""Mobile project installer for generated icons."""

from icongen.plugin.installer import (
    InstallError,
    install_android_icons,
    install_icons,
    install_ios_icons,
)

__all__ = [
    "InstallError",
    "install_android_icons",
    "install_icons",
    "install_ios_icons",
]
