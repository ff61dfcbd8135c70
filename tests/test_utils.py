"""Tests for chainlex.utils."""


class TestLogger:
    """Tests for logger module."""

    def test_get_logger(self) -> None:
        from chainlex.utils.logger import get_logger

        logger = get_logger("mymodule")
        assert logger.name == "chainlex.mymodule"

    def test_logger_with_chainlex_prefix(self) -> None:
        from chainlex.utils.logger import get_logger

        logger = get_logger("chainlex.dispatcher")
        assert logger.name == "chainlex.dispatcher"

    def test_logger_name_starting_with_chainlex_not_submodule(self) -> None:
        """Names starting with 'chainlex' but not submodules should get prefix."""
        from chainlex.utils.logger import get_logger

        logger = get_logger("chainlex_other")
        assert logger.name == "chainlex.chainlex_other"

    def test_logger_exact_chainlex_name(self) -> None:
        from chainlex.utils.logger import get_logger

        logger = get_logger("chainlex")
        assert logger.name == "chainlex"

    def test_exported_from_utils(self) -> None:
        from chainlex.utils import get_logger

        assert callable(get_logger)
