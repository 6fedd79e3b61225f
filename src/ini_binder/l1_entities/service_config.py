"""Sample service configuration records — a MySQL and a Redis section."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field

from ini_binder.l1_entities.schema import Ini


class MysqlConfig(BaseModel):
    address: Annotated[str, Ini('address')] = ''
    port: Annotated[int, Ini('port')] = 0
    username: Annotated[str, Ini('username')] = ''
    password: Annotated[str, Ini('password')] = ''


class RedisConfig(BaseModel):
    host: Annotated[str, Ini('host')] = ''
    port: Annotated[int, Ini('port')] = 0
    password: Annotated[str, Ini('password')] = ''
    database: Annotated[int, Ini('database')] = 0
    test: Annotated[bool, Ini('test')] = False


class ServiceConfig(BaseModel):
    mysql: Annotated[MysqlConfig, Ini('mysql')] = Field(default_factory=MysqlConfig)
    redis: Annotated[RedisConfig, Ini('redis')] = Field(default_factory=RedisConfig)
