"""Name-keyed lookup of ASR and diarization backend classes."""

from typing import TypeVar, Generic, Callable, Any

from stt_diarize.core.exceptions import RegistryError

T = TypeVar("T")


class Registry(Generic[T]):
    """
    Maps config backend names (``asr.backend``, ``diarization.backend``)
    to the classes that implement them.

    Backend modules register themselves on import, and the pipeline builds
    the configured one on first use:

        @ASRRegistry.register("faster-whisper")
        class FasterWhisperASR(BaseASR):
            ...

        asr = ASRRegistry.create(config.asr.backend, config=config.asr)
    """

    def __init__(self, name: str):
        self.name = name
        self._registry: dict[str, type[T]] = {}

    def register(self, key: str) -> Callable[[type[T]], type[T]]:
        """Decorator to register a backend class."""
        def decorator(cls: type[T]) -> type[T]:
            if key in self._registry:
                raise RegistryError(f"{self.name}: '{key}' already registered")
            self._registry[key] = cls
            return cls
        return decorator

    def create(self, key: str, **kwargs: Any) -> T:
        """Instantiate a registered backend by key."""
        return self.get(key)(**kwargs)

    def get(self, key: str) -> type[T]:
        """Get the class (not instance) by key."""
        if key not in self._registry:
            available = ", ".join(self._registry.keys()) or "none"
            raise RegistryError(f"{self.name}: '{key}' not found. Available: {available}")
        return self._registry[key]

    def list(self) -> list[str]:
        """List all registered backend keys."""
        return list(self._registry.keys())

    def __contains__(self, key: str) -> bool:
        return key in self._registry

    def __repr__(self) -> str:
        return f"Registry({self.name}, backends={self.list()})"
