from .gym_env import AUX_VECTOR_SIZE, BOARD_CHANNELS, JumpEraseEnv

__all__ = ["AUX_VECTOR_SIZE", "BOARD_CHANNELS", "JumpEraseEnv"]
