"""
Static market news shown on the dashboard.
"""

from typing import List

from .models import NewsItem


def fetch_news() -> List[NewsItem]:
    """Return the current news headlines."""
    return [
        NewsItem(id=1, title="بیت کوین رکورد جدیدی ثبت کرد", source="CoinDesk", date="2025-09-15"),
        NewsItem(id=2, title="طلا به دلیل نوسانات بازار افزایش یافت", source="GoldNews", date="2025-09-14"),
        NewsItem(id=3, title="دلار آمریکا در مقابل یورو تقویت شد", source="ForexToday", date="2025-09-13"),
    ]
