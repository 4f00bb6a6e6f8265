# SPDX-FileCopyrightText: 2025-present DouglasMacKrell <d.mackrell@gmail.com>
#
# SPDX-License-Identifier: MIT

"""malapi - Async MyAnimeList API bindings."""

from malapi.__about__ import __version__
from malapi.auth.credentials import Credentials
from malapi.clients.anime import AnimeApiClient
from malapi.clients.manga import MangaApiClient
from malapi.fields import FieldSet

__all__ = [
    "AnimeApiClient",
    "Credentials",
    "FieldSet",
    "MangaApiClient",
    "__version__",
]
