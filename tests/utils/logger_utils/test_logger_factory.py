import logging
import re

from line_reader.utils.logger_utils.logger_factory import LoggerFactoryImpl, get_logger

ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*m")  # ANSI エスケープのざっくり検出


def _close_handlers(logger: logging.Logger) -> None:
    for h in logger.handlers[:]:
        logger.removeHandler(h)
        h.close()


def test_get_logger_is_idempotent_for_handlers(tmp_path):
    logger_name = "LINE-READER-TEST-IDEMPOTENT"
    log_file_path = tmp_path / "app.log"

    first_logger = get_logger(logger_name, log_file=log_file_path, level="INFO")
    first_handler_count = len(first_logger.handlers)

    # 同じ名前・同じログファイルで再取得してもハンドラが増えないこと
    second_logger = get_logger(logger_name, log_file=log_file_path, level="DEBUG")
    second_handler_count = len(second_logger.handlers)

    try:
        assert first_logger is second_logger
        assert second_handler_count == first_handler_count == 2
        assert second_logger.level == logging.DEBUG
    finally:
        _close_handlers(first_logger)


def test_get_logger_swaps_file_handler_when_path_changes(tmp_path):
    logger_name = "LINE-READER-TEST-SWAP"
    first = tmp_path / "a.log"
    second = tmp_path / "b.log"

    logger = get_logger(logger_name, log_file=first)
    logger = get_logger(logger_name, log_file=second)
    logger.warning("to b")

    try:
        file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        assert "to b" in second.read_text(encoding="utf-8")
        assert "to b" not in first.read_text(encoding="utf-8")
    finally:
        _close_handlers(logger)


def test_console_has_color_and_file_line(capsys, tmp_path):
    log_file_path = tmp_path / "test.log"
    logger = LoggerFactoryImpl("LINE-READER-TEST-CONSOLE", log_file=str(log_file_path), level=logging.DEBUG)

    try:
        logger.info("情報ログ: hello")
        logger.error("エラーログ: boom")
    finally:
        _close_handlers(logger)

    console_output = capsys.readouterr().err

    # 1) コンソールに ANSI カラーが含まれる
    assert ANSI_PATTERN.search(console_output), "標準エラーに ANSI カラーコードが含まれていません"

    # 2) (filename:lineno) が含まれる
    assert re.search(r"\([^)]+:\d+\):", console_output), "標準エラーに (filename:lineno) が含まれていません"

    # 3) ファイルが作成され、ANSI が含まれていない（プレーン）
    file_text = log_file_path.read_text(encoding="utf-8")
    assert not ANSI_PATTERN.search(file_text), "ログファイルに ANSI カラーコードが含まれています（想定外）"
    assert re.search(r"\([^)]+:\d+\):", file_text), "ログファイルに (filename:lineno) が含まれていません"


def test_interface_swap_with_mock():
    """
    Interface（LoggerFactory）に沿って Moc を差し替えられることを確認。
    """
    from line_reader.utils.logger_utils.logger_interface import LoggerFactory

    class MockLogger:
        def __init__(self):
            self.messages = []
        def info(self, message): self.messages.append(("INFO", message))
        def error(self, message): self.messages.append(("ERROR", message))

    def mock_factory(name, log_file=None, level=logging.INFO):
        return MockLogger()

    mock_factory_typed: LoggerFactory = mock_factory  # Protocol適合チェック

    logger = mock_factory_typed("MOCK", log_file=None, level=logging.INFO)
    logger.info("mock info")
    logger.error("mock error")

    assert ("INFO", "mock info") in logger.messages
    assert ("ERROR", "mock error") in logger.messages


def test_get_logger_leaves_foreign_handlers_alone(tmp_path):
    logger_name = "LINE-READER-TEST-FOREIGN"
    logger = logging.getLogger(logger_name)
    null_handler = logging.NullHandler()
    null_handler.setLevel(logging.CRITICAL)
    foreign_file = logging.FileHandler(tmp_path / "other.log", encoding="utf-8")
    foreign_file.setLevel(logging.ERROR)
    logger.addHandler(null_handler)
    logger.addHandler(foreign_file)

    try:
        get_logger(logger_name, level="DEBUG")
        get_logger(logger_name, level="DEBUG")

        own_streams = [
            h for h in logger.handlers
            if h not in (null_handler, foreign_file) and isinstance(h, logging.StreamHandler)
        ]
        # 自前の標準エラー用ハンドラが 1 つだけ追加され、他所のハンドラは残る
        assert len(own_streams) == 1
        assert null_handler in logger.handlers
        assert foreign_file in logger.handlers
        assert null_handler.level == logging.CRITICAL
        assert foreign_file.level == logging.ERROR
    finally:
        _close_handlers(logger)
