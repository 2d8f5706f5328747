from __future__ import annotations

from fastapi import FastAPI, HTTPException

from ...core.errors import UNKNOWN_MOVIE_DETAIL, MovieNotFoundError
from ...core.registry import MovieRegistry
from ...core.types import Actor, Credit, Movie, as_actor, as_movie
from ..serializers import actor_names, credit_to_item, movie_titles, movie_to_list_item, parse_name_list


def _movie_or_400(title: str) -> Movie:
    try:
        return as_movie(title)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _actor_or_400(name: object) -> Actor:
    if not isinstance(name, str):
        raise HTTPException(status_code=400, detail="actor must be a string")
    try:
        return as_actor(name)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


def mount_movies_api(app: FastAPI, registry: MovieRegistry[Movie, Actor]) -> None:
    # Titles and names are `:path` params so values like "Face/Off" route intact.
    # The `/actors` and `/movies` sub-resources must be registered before the bare
    # `/api/movies/{title:path}` routes.

    @app.get("/api/movies")
    def list_movies() -> list[dict]:
        out: list[dict] = []
        for movie in sorted(registry.movies()):
            try:
                cast = registry.actors_for(movie)
            except MovieNotFoundError:
                # Removed between the listing and the lookup.
                continue
            out.append(movie_to_list_item(movie, cast))
        return out

    @app.post("/api/movies/{title:path}/actors")
    def tag_actor(title: str, body: dict) -> dict:
        movie = _movie_or_400(title)
        actor = _actor_or_400(body.get("actor"))
        cast = registry.tag(movie, actor)
        return {
            "ok": True,
            "title": movie.title,
            "actors": actor_names(cast),
            "revision": registry.revision(),
        }

    @app.get("/api/movies/{title:path}/actors")
    def get_actors(title: str) -> list[str]:
        movie = _movie_or_400(title)
        try:
            return actor_names(registry.actors_for(movie))
        except MovieNotFoundError:
            raise HTTPException(status_code=404, detail=f"{UNKNOWN_MOVIE_DETAIL}: {movie.title}")

    @app.put("/api/movies/{title:path}")
    def release_movie(title: str, body: dict) -> dict:
        """Release a movie, replacing any previous cast.

        Body:
          - actors: list[str]
        """

        movie = _movie_or_400(title)
        try:
            names = parse_name_list(body.get("actors", []), field="actors")
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        actors = {_actor_or_400(n) for n in names}

        registry.release(movie, actors)
        return {"ok": True, "title": movie.title, "actors": actor_names(actors), "revision": registry.revision()}

    @app.delete("/api/movies/{title:path}")
    def remove_movie(title: str) -> dict:
        movie = _movie_or_400(title)
        return {"removed": registry.remove(movie), "revision": registry.revision()}

    @app.get("/api/actors")
    def list_actors() -> list[str]:
        return actor_names(registry.all_actors())

    @app.get("/api/actors/{name:path}/movies")
    def get_movies_for_actor(name: str) -> list[str]:
        actor = _actor_or_400(name)
        return movie_titles(registry.movies_for(actor))

    @app.get("/api/credits")
    def get_credits() -> dict:
        credits = sorted(Credit(m, a) for m, a in registry.credits())
        return {
            "total": registry.total_credits(),
            "credits": [credit_to_item(c) for c in credits],
        }
