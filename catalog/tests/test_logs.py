from catalog.logs import LogContext, ensure_log_schema, search_logs


def test_log_context_write_and_search(tmp_path):
    db = str(tmp_path / "log.db")
    ensure_log_schema(db)

    log = LogContext("GET_EVENT", db)
    log.set_entity("EVENT", "12")
    log.write("OK")

    log = LogContext("LIST_EVENTS", db)
    log.set_payload({"filter": {"status": "OPEN"}})
    log.write("ERROR", "boom")

    total, items = search_logs(db, None, None, None, None, 1, 20)
    assert total == 2

    total, items = search_logs(db, None, "GET_EVENT", None, None, 1, 20)
    assert total == 1
    assert items[0]["entity_id"] == "12"
    assert items[0]["result"] == "OK"

    total, items = search_logs(db, "OPEN", None, None, None, 1, 20)
    assert total == 1
    assert items[0]["err_msg"] == "boom"

    total, items = search_logs(db, None, None, None, None, 2, 1)
    assert total == 2 and len(items) == 1


def test_write_without_schema_does_not_raise(tmp_path, caplog):
    db = str(tmp_path / "no_schema.db")
    log = LogContext("LIST_RACES", db)
    log.write("OK")
    assert "operation log write failed" in caplog.text
