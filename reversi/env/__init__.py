from .gym_env import ReversiEnv

__all__ = ["ReversiEnv"]
