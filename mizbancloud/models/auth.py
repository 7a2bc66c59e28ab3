"""
Auth / financial models
"""

from typing import Optional

from mizbancloud.models.common import MizbanModel


class Wallet(MizbanModel):
    balance: float
    currency: Optional[str] = None
