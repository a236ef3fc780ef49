from __future__ import annotations

import io
import logging
import unittest
from collections.abc import Mapping

from condtpl import (
    ConditionalTemplateEngine,
    DefaultLoggerFactory,
    RewriterConfig,
    RewriteState,
    TemplateRewriter,
    template_engine_factory,
)
from condtpl.core.models import Outcome

NESTED_PAIR = "/*if:a*//*if:b*/x/*endif*//*endif*/"


class _ExplodingMapping(Mapping):
    """Mapping whose lookups fail with a non-KeyError exception."""

    def __getitem__(self, key):
        raise RuntimeError("boom")

    def __contains__(self, key):
        raise RuntimeError("boom")

    def __iter__(self):
        return iter(())

    def __len__(self):
        return 0


class _AlwaysKeep:
    def evaluate(self, condition, data):
        return Outcome.KEPT


class TemplateEngineTests(unittest.TestCase):
    def test_render_resolves_blocks(self) -> None:
        engine = ConditionalTemplateEngine()
        self.assertEqual(engine.render("Hello /*if:showName*/World/*endif*/!", {"showName": True}), "Hello World!")
        self.assertEqual(engine.render("Hello /*if:showName*/World/*endif*/!", {}), "Hello !")

    def test_report_exposes_state(self) -> None:
        report = ConditionalTemplateEngine().report("/*if:a*/A/*endif*/", {"a": 1})
        self.assertEqual(report.result, "A")
        self.assertIs(report.state, RewriteState.FIXED_POINT)

    def test_injected_evaluator(self) -> None:
        engine = ConditionalTemplateEngine(evaluator=_AlwaysKeep())
        self.assertEqual(engine.render("/*if:missing*/kept/*endif*/", {}), "kept")

    def test_injected_resolver(self) -> None:
        class _Resolver:
            def resolve(self, data, path):
                return path == "on"

        engine = ConditionalTemplateEngine(resolver=_Resolver())
        self.assertEqual(engine.render("/*if:on*/1/*endif*//*if:off*/2/*endif*/", {}), "1")

    def test_collaborator_failure_falls_back_to_input(self) -> None:
        engine = ConditionalTemplateEngine()
        tpl = "/*if:a*/A/*endif*/"
        with self.assertLogs("condtpl.templates", level="ERROR") as cm:
            out = engine.render(tpl, _ExplodingMapping())
        self.assertEqual(out, tpl)
        self.assertIn("template rendering failed", cm.output[0])

    def test_process_does_not_swallow_collaborator_failure(self) -> None:
        from condtpl import process

        with self.assertRaises(RuntimeError):
            process("/*if:a*/A/*endif*/", _ExplodingMapping())

    def test_invalid_inputs_still_raise(self) -> None:
        with self.assertRaises(TypeError):
            ConditionalTemplateEngine().render(None, {})  # type: ignore[arg-type]

    def test_factory_applies_bound(self) -> None:
        engine = template_engine_factory(max_passes=1)
        with self.assertLogs("condtpl.rewriter", level="WARNING"):
            report = engine.report("/*if:a*//*if:b*/x/*endif*//*endif*/", {"a": 1, "b": 1})
        self.assertIs(report.state, RewriteState.BOUND_EXCEEDED)
        self.assertEqual(report.result, "/*if:a*/x/*endif*/")

    def test_factory_rejects_bad_bound(self) -> None:
        with self.assertRaises(ValueError):
            template_engine_factory(max_passes=0)


class _Collect(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


class _RecordingFactory:
    """Logger factory remembering which component names were requested."""

    def __init__(self) -> None:
        self.names: list[str] = []

    def get_logger(self, name: str) -> logging.Logger:
        self.names.append(name)
        return logging.getLogger(f"engine-test.{name}")


class EngineLoggingTests(unittest.TestCase):
    def test_injected_logger_receives_bound_warning(self) -> None:
        lg = logging.getLogger("engine-test.injected")
        sink = _Collect()
        lg.addHandler(sink)
        self.addCleanup(lg.removeHandler, sink)

        engine = template_engine_factory(max_passes=1, logger=lg)
        report = engine.report(NESTED_PAIR, {"a": 1, "b": 1})

        self.assertIs(report.state, RewriteState.BOUND_EXCEEDED)
        warnings = [r for r in sink.records if r.levelno == logging.WARNING]
        self.assertEqual(len(warnings), 1)
        self.assertIn("rewrite stopped after 1 passes", warnings[0].getMessage())

    def test_injected_logger_receives_render_failure(self) -> None:
        lg = logging.getLogger("engine-test.failure")
        with self.assertLogs(lg, level="ERROR"):
            ConditionalTemplateEngine(logger=lg).render("/*if:a*/A/*endif*/", _ExplodingMapping())

    def test_logger_factory_scopes_each_component(self) -> None:
        factory = _RecordingFactory()
        engine = ConditionalTemplateEngine(logger_factory=factory, config=RewriterConfig(max_passes=1))
        self.assertEqual(sorted(factory.names), ["evaluator", "rewriter", "templates"])
        with self.assertLogs("engine-test.rewriter", level="WARNING"):
            engine.report(NESTED_PAIR, {"a": 1, "b": 1})

    def test_default_logger_factory_writes_to_its_stream(self) -> None:
        base = logging.getLogger("condtpl")
        saved = (list(base.handlers), base.level, base.propagate)
        base.handlers.clear()

        def _restore() -> None:
            base.handlers[:] = saved[0]
            base.setLevel(saved[1])
            base.propagate = saved[2]

        self.addCleanup(_restore)

        stream = io.StringIO()
        engine = template_engine_factory(
            max_passes=1,
            logger_factory=DefaultLoggerFactory(level=logging.WARNING, stream=stream),
        )
        engine.report(NESTED_PAIR, {"a": 1, "b": 1})
        self.assertIn("WARNING: \u26a0  rewrite stopped after 1 passes", stream.getvalue())


class EngineWiringTests(unittest.TestCase):
    def test_prebuilt_rewriter_is_used_as_is(self) -> None:
        engine = ConditionalTemplateEngine(rewriter=TemplateRewriter(config=RewriterConfig(max_passes=1)))
        with self.assertLogs("condtpl.rewriter", level="WARNING"):
            report = engine.report(NESTED_PAIR, {"a": 1, "b": 1})
        self.assertIs(report.state, RewriteState.BOUND_EXCEEDED)

    def test_prebuilt_rewriter_rejects_other_collaborators(self) -> None:
        cases = {
            "config": {"config": RewriterConfig(max_passes=1)},
            "evaluator": {"evaluator": _AlwaysKeep()},
            "resolver": {"resolver": object()},
        }
        for name, extra in cases.items():
            with self.subTest(name=name):
                with self.assertRaises(TypeError) as ctx:
                    ConditionalTemplateEngine(rewriter=TemplateRewriter(), **extra)
                self.assertIn(name, str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
