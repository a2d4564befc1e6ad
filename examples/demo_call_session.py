#!/usr/bin/env python3
"""
Callid Mapper Demo - Call Session Lifecycle
===========================================

Walks one call through the registry the way a call-management server would:
- a call arrives and gets an identifier
- an external client resolves the identifier
- the call is upgraded and the new call object takes over the identifier
- the call ends and the identifier stops resolving

Run with:
    python examples/demo_call_session.py
"""

from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import ConsoleSpanExporter, SimpleSpanProcessor

from callid_mapper import CallIdMapper


class Call:
    """Toy call object."""

    def __init__(self, number: str, kind: str = "voice"):
        self.number = number
        self.kind = kind

    def __repr__(self) -> str:
        return f"Call({self.number!r}, {self.kind!r})"


def main():
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter()))
    trace.set_tracer_provider(provider)

    mapper = CallIdMapper("TC")

    voice = Call("+15550100")
    call_id = mapper.add_call(voice)
    print(f"📞 New call {voice} -> {call_id}")

    print(f"🔎 Client resolves {call_id}: {mapper.get_call(call_id)}")
    print(f"🚫 Client sends 42: {mapper.get_call(42)}")

    video = Call("+15550100", kind="video")
    mapper.replace_call(video, voice)
    print(f"🔁 Upgraded, {call_id} now resolves to {mapper.get_call(call_id)}")

    mapper.remove_call(video)
    print(f"📴 Call ended, {call_id} resolves to {mapper.get_call(call_id)}")


if __name__ == "__main__":
    main()
