from tileboard.engine.gameevents.bus import EventBus

__all__ = ["EventBus"]
