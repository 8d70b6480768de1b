'''
Represent core domain and feed types for keel.

Re-exports the order factory and the cursor concatenation entry points.
'''

from __future__ import annotations

from keel.core.domain.order_factory import create_order
from keel.core.feeds.concat_cursor import ConcatCursor

__all__ = ['ConcatCursor', 'create_order']
