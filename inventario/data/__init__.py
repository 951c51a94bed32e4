# Data module exports
from .models import (
    Product,
    ProductDraft,
    Trend,
    TrendPrediction,
    TrendSeries,
    ConnectionStatus,
    DashboardSnapshot
)
