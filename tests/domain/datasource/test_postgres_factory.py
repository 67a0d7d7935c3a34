"""Tests for dbhotel.domain.datasource.postgres_factory."""

import pytest

from dbhotel.domain.datasource.postgres_factory import (
    PostgresDataSourceFactory,
    create_postgres_data_source,
)

PG_URL = "jdbc:postgresql://pg.example:5432/hotel"


class TestPostgresDataSourceFactory:

    def test_minimum_idle_two_and_no_init_sql(self, recording_config_builder, postgres_fake_pool_builder):
        pool = create_postgres_data_source(
            PG_URL, "u", "p",
            config_builder=recording_config_builder,
            pool_builder=postgres_fake_pool_builder,
        )

        assert recording_config_builder.calls == [(PG_URL, "u", "p", 2)]
        assert pool.config.connection_init_sql is None

    def test_independent_handles(self, postgres_fake_pool_builder):
        factory = PostgresDataSourceFactory(pool_builder=postgres_fake_pool_builder)

        assert factory.create_data_source(PG_URL, "u", "p") is not factory.create_data_source(PG_URL, "u", "p")

    def test_error_propagates(self, mocker):
        pool_builder = mocker.Mock()
        pool_builder.build_pool.side_effect = RuntimeError("pool failed")

        with pytest.raises(RuntimeError, match="pool failed"):
            create_postgres_data_source(PG_URL, "u", "p", pool_builder=pool_builder)
