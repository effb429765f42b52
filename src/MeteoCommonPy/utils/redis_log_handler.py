"""
Redis Pub/Sub にログを配信するハンドラ
"""
import asyncio
import functools
import logging

import redis.asyncio as aioredis


class RedisLogHandler(logging.Handler):
    """ログレコードを Redis のチャンネルへ publish する"""

    def __init__(self, host: str = "localhost", port: int = 6379, db: int = 0,
                 channel: str = "meteo.log", level: int = logging.NOTSET):
        super().__init__(level)
        self.channel = channel
        self.redis = aioredis.Redis(host=host, port=port, db=db, decode_responses=True)

    async def publish(self, message: str) -> None:
        await self.redis.publish(self.channel, message)

    async def _publish_and_release(self, message: str) -> None:
        # イベントループ外からの送信はループごとに接続を作り直す
        try:
            await self.publish(message)
        finally:
            pool = getattr(self.redis, "connection_pool", None)
            if pool is not None:
                await pool.disconnect()

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
        except Exception:
            self.handleError(record)
            return

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None

        if loop is not None:
            task = loop.create_task(self.publish(message))
            task.add_done_callback(functools.partial(self._on_publish_done, record))
            return

        try:
            asyncio.run(self._publish_and_release(message))
        except Exception:
            self.handleError(record)

    def _on_publish_done(self, record: logging.LogRecord, task: asyncio.Task) -> None:
        if not task.cancelled() and task.exception() is not None:
            self.handleError(record)
