from resume_analyzer.analysis.base import BaseResumeAnalyzer
from resume_analyzer.analysis.factory import AnalyzerFactory
from resume_analyzer.config.settings import Settings, get_settings
from resume_analyzer.logging.logger import Log


def build_analyzer(settings: Settings | None = None) -> BaseResumeAnalyzer:
    """Entry point: load settings -> configure logging -> build the analyzer.

    Call once at process start and share the returned analyzer; it holds no
    per-request state.
    """
    settings = settings if settings is not None else get_settings()
    Log.configure(settings.log_level)
    analyzer = AnalyzerFactory.create(settings)
    Log.info(
        f"Resume analyzer ready (env={settings.app_env}, "
        f"provider={settings.analysis_provider})"
    )
    return analyzer
