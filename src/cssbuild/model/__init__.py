from cssbuild.model.rectangle import Rectangle

__all__ = ["Rectangle"]
