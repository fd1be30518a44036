"""
gui.py - pygame interface for the 4x4 Connect Four game

The window shows a status line, a row of column headers, the board and a
"New Game" button. Hovering a header highlights it in the current player's
color; clicking it drops a token into that column. A rejected click makes
the header flash instead of changing the board.

Event handling (handle_event) is kept apart from the main loop (run) so the
interface can be exercised headless with SDL_VIDEODRIVER=dummy.
"""

from typing import Optional, Tuple

import pygame

from connect4x4.config import Color, DisplayConfig
from connect4x4.debug import debug
from connect4x4.game.rules import ConnectFourGame
from connect4x4.utils import Player, Winner

WINDOW_TITLE = "Connect Four - Two Player Game"


class ConnectFourGUI:
    """pygame window driving a ConnectFourGame."""

    def __init__(self, game: Optional[ConnectFourGame] = None,
                 display: Optional[DisplayConfig] = None) -> None:
        self.game = game or ConnectFourGame()
        self.display = display or DisplayConfig()

        self.hovered_column: Optional[int] = None
        self.button_hovered = False
        self.flash_column: Optional[int] = None
        self._flash_until = 0
        self.running = True

        pygame.init()
        self.screen = pygame.display.set_mode(self.window_size())
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()

        self._status_font = pygame.font.SysFont("arial", 22, bold=True)
        self._header_font = pygame.font.SysFont("arial", 14, bold=True)
        self._info_font = pygame.font.SysFont("arial", 12, italic=True)
        debug.debug("GUI initialized", "gui")

    # Layout

    def board_width(self) -> int:
        d = self.display
        return self.game.cols * d.cell_size + (self.game.cols - 1) * d.gap + 2 * d.margin

    def window_size(self) -> Tuple[int, int]:
        d = self.display
        board_height = (d.header_height + self.game.rows * (d.cell_size + d.gap) + 2 * d.margin)
        width = max(self.board_width(), d.min_width)
        return width, d.status_height + board_height + d.footer_height

    def board_left(self) -> int:
        """x coordinate of the board's left edge; the board is centred in the window."""
        return (self.window_size()[0] - self.board_width()) // 2

    def header_rect(self, col: int) -> pygame.Rect:
        d = self.display
        x = self.board_left() + d.margin + col * (d.cell_size + d.gap)
        y = d.status_height + d.margin
        return pygame.Rect(x, y, d.cell_size, d.header_height)

    def cell_rect(self, row: int, col: int) -> pygame.Rect:
        d = self.display
        x = self.board_left() + d.margin + col * (d.cell_size + d.gap)
        y = d.status_height + d.margin + d.header_height + d.gap + row * (d.cell_size + d.gap)
        return pygame.Rect(x, y, d.cell_size, d.cell_size)

    def button_rect(self) -> pygame.Rect:
        width, height = self.display.button_size
        window_width, window_height = self.window_size()
        top = window_height - self.display.footer_height + self.display.margin
        return pygame.Rect((window_width - width) // 2, top, width, height)

    def column_at(self, pos: Tuple[int, int]) -> Optional[int]:
        """Column whose header contains pos, or None."""
        for col in range(self.game.cols):
            if self.header_rect(col).collidepoint(pos):
                return col
        return None

    # Presentation state

    def player_color(self, player: Player) -> Color:
        return self.display.player_one if player == Player.ONE else self.display.player_two

    def status_text(self) -> Tuple[str, Color]:
        """Status line text and color for the current game state."""
        if self.game.is_game_over():
            winner = self.game.get_winner()
            if winner == Winner.TIE:
                return "It's a Tie!", self.display.tie_text
            return f"Player {winner.player.number} wins!", self.player_color(winner.player)

        player = self.game.get_current_player()
        text = f"Player {player.number}'s Turn - Click column header to drop token"
        return text, self.player_color(player)

    def is_flashing(self, col: int) -> bool:
        return self.flash_column == col and pygame.time.get_ticks() < self._flash_until

    def header_label(self, col: int) -> Tuple[str, Color]:
        """Text and background color of a column header."""
        if self.is_flashing(col):
            return "FULL" if self.game.board.is_column_full(col) else f"Col {col}", self.display.error

        if col == self.hovered_column and not self.game.is_game_over():
            player = self.game.get_current_player()
            return f"DROP {player.number}", self.player_color(player)

        return f"Col {col}", self.display.header

    def info_text(self) -> str:
        return (f"Board: {self.game.rows}x{self.game.cols} • Win: {self.game.win_length} in a row "
                f"• Hover over column headers to play")

    # Input

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.key == pygame.K_n:
                self.reset_game()
        elif event.type == pygame.MOUSEMOTION:
            self.update_hover(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.button_rect().collidepoint(event.pos):
                self.reset_game()
                return
            col = self.column_at(event.pos)
            if col is not None:
                self.handle_column_click(col)

    def update_hover(self, pos: Tuple[int, int]) -> None:
        col = self.column_at(pos)
        self.hovered_column = col if not self.game.is_game_over() else None
        self.button_hovered = self.button_rect().collidepoint(pos)

    def handle_column_click(self, col: int) -> bool:
        """
        Drop a token for the current player into col.

        Returns:
            True if the token was placed; a rejected move flashes the header
        """
        if self.game.is_game_over():
            return False

        if self.game.drop_token(col):
            self.hovered_column = None
            return True

        debug.debug(f"Column {col} rejected the drop", "gui")
        self.flash_column = col
        self._flash_until = pygame.time.get_ticks() + self.display.flash_ms
        return False

    def reset_game(self) -> None:
        debug.info("Starting a new game", "gui")
        self.game.reset()
        self.hovered_column = None
        self.flash_column = None

    # Drawing

    def draw(self) -> None:
        d = self.display
        self.screen.fill(d.background)

        text, color = self.status_text()
        status = self._status_font.render(text, True, color)
        self.screen.blit(status, status.get_rect(center=(self.window_size()[0] // 2, d.status_height // 2)))

        window_height = self.window_size()[1]
        board_area = pygame.Rect(self.board_left(), d.status_height, self.board_width(),
                                 window_height - d.status_height - d.footer_height)
        pygame.draw.rect(self.screen, d.board, board_area)

        for col in range(self.game.cols):
            self._draw_header(col)

        winning = set(self.game.get_winning_line())
        for row in range(self.game.rows):
            for col in range(self.game.cols):
                self._draw_cell(row, col, (row, col) in winning)

        self._draw_footer()
        pygame.display.flip()

    def _draw_header(self, col: int) -> None:
        rect = self.header_rect(col)
        label, background = self.header_label(col)
        pygame.draw.rect(self.screen, background, rect)
        pygame.draw.rect(self.screen, self.display.header_text, rect, 2)
        text = self._header_font.render(label, True, self.display.header_text)
        self.screen.blit(text, text.get_rect(center=rect.center))

    def _draw_cell(self, row: int, col: int, winning: bool) -> None:
        rect = self.cell_rect(row, col)
        pygame.draw.rect(self.screen, self.display.empty, rect)
        pygame.draw.rect(self.screen, self.display.grid, rect, 3)

        token = self.game.get_token(row, col)
        if token == Player.EMPTY:
            return

        radius = self.display.cell_size * 2 // 5
        pygame.draw.circle(self.screen, self.player_color(token), rect.center, radius)
        if winning:
            pygame.draw.circle(self.screen, self.display.winning_outline, rect.center, radius, 4)

    def _draw_footer(self) -> None:
        d = self.display
        rect = self.button_rect()
        pygame.draw.rect(self.screen, d.button_hover if self.button_hovered else d.button, rect)
        label = self._header_font.render("New Game", True, d.header_text)
        self.screen.blit(label, label.get_rect(center=rect.center))

        info = self._info_font.render(self.info_text(), True, d.info_text)
        self.screen.blit(info, info.get_rect(midtop=(self.window_size()[0] // 2, rect.bottom + d.gap)))

    def run(self) -> None:
        """Main loop: process events and redraw until the window closes."""
        while self.running:
            for event in pygame.event.get():
                self.handle_event(event)
            self.draw()
            self.clock.tick(self.display.fps)
        pygame.quit()


def main() -> None:
    ConnectFourGUI().run()


if __name__ == "__main__":
    main()
