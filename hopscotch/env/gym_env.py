from __future__ import annotations

from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from hopscotch.core import DIRECTIONS, GameBoard, Move, jump_target
from hopscotch.io import BoardLayout, random_layout

BOARD_CHANNELS = 3
AUX_VECTOR_SIZE = 2


class JumpEraseEnv(gym.Env):
    """Gymnasium wrapper around :class:`GameBoard`.

    Actions index :data:`hopscotch.core.DIRECTIONS`; every applied jump is
    worth a reward of 1, so the episode return is the score minus the
    starting cell.
    """

    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(
        self,
        layout: Optional[BoardLayout] = None,
        *,
        size: int = 10,
        enforce_legal_actions: bool = True,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self._layout = layout
        self._size = layout.size if layout is not None else size
        self._enforce_legal = enforce_legal_actions
        self.render_mode = render_mode

        board_shape = (BOARD_CHANNELS, self._size, self._size)
        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(low=0.0, high=1.0, shape=board_shape, dtype=np.float32),
                "aux": spaces.Box(low=0.0, high=1.0, shape=(AUX_VECTOR_SIZE,), dtype=np.float32),
            }
        )
        self.action_space = spaces.Discrete(len(DIRECTIONS))

        self.board = self._new_board()

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        layout = options.get("layout") if options else None
        if layout is not None:
            if layout.size != self._size:
                raise ValueError(f"Layout size {layout.size} does not match environment size {self._size}.")
            self._layout = layout
        self.board = self._new_board()
        return self._build_observation(), self._build_info()

    def step(self, action_index: int):
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")

        target = jump_target(self.board.snapshot(), int(action_index))
        reward = 0.0
        if target is None:
            if self._enforce_legal:
                raise ValueError("Illegal action provided and enforce_legal_actions=True.")
        else:
            self.board.play(Move(*target))
            reward = 1.0

        terminated = self.board.is_game_over
        truncated = False
        return self._build_observation(), reward, terminated, truncated, self._build_info()

    def legal_action_mask(self) -> np.ndarray:
        state = self.board.snapshot()
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        for idx in range(len(DIRECTIONS)):
            if jump_target(state, idx) is not None:
                mask[idx] = 1
        return mask

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return self._render_ascii()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _new_board(self) -> GameBoard:
        if self._layout is not None:
            return self._layout.to_board()
        return random_layout(self._size, self.np_random).to_board()

    def _build_observation(self) -> Dict[str, np.ndarray]:
        values = self.board.grid_values().astype(np.float32)
        peak = values.max()
        board = np.zeros((BOARD_CHANNELS, self._size, self._size), dtype=np.float32)
        if peak > 0:
            board[0] = values / peak
        board[1] = self.board.erased_mask()
        board[2][self.board.position] = 1.0

        total = float(self._size * self._size)
        mobility = float(self.legal_action_mask().sum()) / len(DIRECTIONS)
        aux = np.array([self.board.erased_count() / total, mobility], dtype=np.float32)
        return {"board": board, "aux": aux}

    def _build_info(self) -> Dict[str, np.ndarray]:
        return {"legal_action_mask": self.legal_action_mask(), "score": self.board.score}

    def _render_ascii(self) -> str:
        rows = []
        width = len(str(int(self.board.grid_values().max(initial=0))))
        for r in range(self._size):
            cells = []
            for c in range(self._size):
                if (r, c) == self.board.position:
                    cells.append("*".rjust(width))
                elif self.board.is_erased(r, c):
                    cells.append(" " * width)
                else:
                    cells.append(str(self.board.value_at(r, c)).rjust(width))
            rows.append(" ".join(cells))
        return "\n".join(rows)
