from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import Tuple
from dotenv import load_dotenv

load_dotenv()


def _csv(name: str, default: str) -> Tuple[str, ...]:
    raw = os.getenv(name, default)
    return tuple(p.strip() for p in raw.split(',') if p.strip())


@dataclass(frozen=True)
class SearchConfig:
    W_NAME: int = int(os.getenv('W_NAME', '50'))
    W_DESCRIPTION: int = int(os.getenv('W_DESCRIPTION', '20'))
    W_LOCATION: int = int(os.getenv('W_LOCATION', '30'))
    W_REGION: int = int(os.getenv('W_REGION', '40'))
    W_SIBLING: int = int(os.getenv('W_SIBLING', '10'))
    W_SETTLEMENT: int = int(os.getenv('W_SETTLEMENT', '10'))
    # short region names that also occur inside many settlement names
    STOP_KEYWORDS: Tuple[str, ...] = field(default_factory=lambda: _csv('STOP_KEYWORDS', 'דן'))
    MIN_KEYWORD_LEN: int = int(os.getenv('MIN_KEYWORD_LEN', '2'))
    FILTER_ALL: str = os.getenv('FILTER_ALL', 'all')
    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'WARNING')

CONFIG = SearchConfig()
