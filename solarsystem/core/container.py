"""
Conteneur d'injection de dépendances et configuration application.

Instancie les composants centraux (settings, dépôts, moteur météo, agrégateur) et expose un
singleton `container` utilisé par le reste de l'application.
"""

from solarsystem.core.settings import Settings, get_settings
from solarsystem.domain.services import PeriodAggregator, WeatherConditionEngine
from solarsystem.infra.repo.db import create_schema, get_engine
from solarsystem.infra.repo.solar_system_repo import SqlSolarSystemRepo
from solarsystem.infra.repo.weather_condition_repo import SqlWeatherConditionRepo
from solarsystem.infra.repositories import (
    InMemorySolarSystemRepo,
    InMemoryWeatherConditionRepo,
    RedisSolarSystemRepo,
    RedisWeatherConditionRepo,
)
from solarsystem.infra.seed import seed_default_system


class Container:
    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self._init_stores()
        self.engine = WeatherConditionEngine(
            self.solar_system_repo,
            self.weather_condition_repo,
            epsilon=self.settings.OPTIMAL_AREA_EPSILON,
        )
        self.aggregator = PeriodAggregator(
            self.engine,
            days_per_year=self.settings.DAYS_PER_YEAR,
            max_years=self.settings.MAX_YEARS,
            workers=self.settings.AGGREGATION_WORKERS,
        )
        if self.settings.SEED_DEFAULT_SYSTEM:
            seed_default_system(self.solar_system_repo)

    def _init_stores(self) -> None:
        if self.settings.DATABASE_URL:
            db_engine = get_engine(self.settings.DATABASE_URL)
            create_schema(db_engine)
            self.solar_system_repo = SqlSolarSystemRepo(db_engine)
            self.weather_condition_repo = SqlWeatherConditionRepo(db_engine)
            self.storage_backend = "sql"
            return
        if self.settings.REDIS_URL:
            try:
                self.solar_system_repo = RedisSolarSystemRepo(self.settings.REDIS_URL)
                self.weather_condition_repo = RedisWeatherConditionRepo(self.settings.REDIS_URL)
                self.solar_system_repo.client.ping()
                self.storage_backend = "redis"
                return
            except Exception as err:
                if self.settings.REQUIRE_REDIS:
                    raise RuntimeError("Redis required but unavailable") from err
                self.storage_backend = "memory-fallback"
        else:
            if self.settings.REQUIRE_REDIS:
                raise RuntimeError("Redis required but REDIS_URL not set")
            self.storage_backend = "memory"
        self.solar_system_repo = InMemorySolarSystemRepo()
        self.weather_condition_repo = InMemoryWeatherConditionRepo()


container = Container()
