"""Orchestration of communication from API router to business logic and game registry layers (and the reverse direction)."""

import logging
from uuid import UUID

from src.api.models import (
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    MoveRequest,
    PossibleMovesRequest,
    PossibleMovesResponse,
    WallRequest,
)
from src.core.exceptions import RepositoryError
from src.core.models import GameModel
from src.core.shared_types import Status
from src.db.repository import GameRepository
from src.quoridor.game import Game

logger = logging.getLogger(__name__)


class QuoridorService:
    """Orchestration of layers for Quoridor game."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """All players are known up front, so the game starts right away."""

        # Use info in CreateGameRequest to create a new Game, and convert into GameModel
        new_game = Game.new_game(request.player_names)
        created_game_data = new_game.to_model()

        # Store the GameModel in the repository
        stored_game, game_id = self.repo.create_game(created_game_data)
        logger.info("Created game %s for %s", game_id, stored_game.player_names)

        # Return a GameResponse
        return self._create_game_response(game_id, stored_game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by frontend to check when it is the player's turn for instance.
        """
        game_model = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game_model)

    def possible_moves(self, request: PossibleMovesRequest) -> PossibleMovesResponse:
        """retrieve the cells the player's pawn can move to."""
        stored_model = self._fetch_game(request.game_id)
        game = Game.from_model(stored_model)
        return PossibleMovesResponse(
            game_id=request.game_id,
            player_name=request.player_name,
            possible_moves=game.legal_moves(request.player_name),
        )

    def move_pawn(self, request: MoveRequest) -> GameResponse:
        """Make a pawn move attempt."""
        stored_model = self._fetch_game(request.game_id)
        game = Game.from_model(stored_model)

        # Attempt the move (exceptions propagate, nothing gets stored on failure)
        game.make_move(request.player_name, request.to_cell)

        return self._store(request.game_id, game)

    def place_wall(self, request: WallRequest) -> GameResponse:
        """Make a wall placement attempt."""
        stored_model = self._fetch_game(request.game_id)
        game = Game.from_model(stored_model)

        game.place_wall(request.player_name, request.to_notation())

        return self._store(request.game_id, game)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        if self.repo.delete_game(request.game_id) is None:
            raise RepositoryError(f"Game with game_id={request.game_id} not found.")
        logger.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    def _store(self, game_id: UUID, game: Game) -> GameResponse:
        """Capture updated state in GameModel, store it and build the response"""
        updated = game.to_model()
        self.repo.update_game(game_id, updated)
        if updated.status == Status.FINISHED:
            logger.info("Game %s finished, winner: %s", game_id, updated.winner)
        return self._create_game_response(game_id, updated)

    def _create_game_response(self, game_id: UUID, model: GameModel) -> GameResponse:
        """Convert info in GameModel to a GameResponse (for game with given ID.)"""
        return GameResponse(
            game_id=game_id,
            players=model.player_names,
            positions=dict(zip(model.player_names, model.positions)),
            walls=model.walls,
            turn_player=model.player_names[model.current_player],
            status=Status(model.status),
            winner=model.winner,
            history=model.history,
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
