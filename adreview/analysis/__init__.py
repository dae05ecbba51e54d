from adreview.analysis.base import BaseAnalysisService
from adreview.analysis.factory import AnalysisServiceFactory
from adreview.analysis.service import AnalysisService

__all__ = ["AnalysisService", "AnalysisServiceFactory", "BaseAnalysisService"]
