from sqlalchemy import text


class TestValidateSchema:
    async def test_matching_schema(self, init_db):
        from newsroom.dependencies.mysql import _engine, _validate_schema

        async with _engine.begin() as conn:
            errors = await conn.run_sync(_validate_schema)
        assert errors == []

    async def test_mismatched_schema(self, init_db):
        from newsroom.dependencies.mysql import Base, _engine, _validate_schema

        try:
            async with _engine.begin() as conn:
                await conn.execute(text("DROP TABLE comment"))
                await conn.execute(
                    text(
                        "CREATE TABLE comment ("
                        " id INTEGER PRIMARY KEY,"
                        " article_id INTEGER,"
                        " extra TEXT)"
                    )
                )
                errors = await conn.run_sync(_validate_schema)
        finally:
            async with _engine.begin() as conn:
                await conn.run_sync(Base.metadata.drop_all)
                await conn.run_sync(Base.metadata.create_all)

        assert any("'author'" in error and "DB에는 없습니다" in error for error in errors)
        assert any("'extra'" in error and "모델에는 없습니다" in error for error in errors)
        assert any(
            error.startswith("[comment.article_id] nullable 불일치") for error in errors
        )
