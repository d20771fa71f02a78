# IN THIS FILE: MOVIE DONATION CATALOGUES (PLAIN + IMDB-BACKED)
import logging
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)

NEW_MOVIE_SUBJECT = "New Movie"
ALL_MEMBERS = "All members"


class Movie:
    def __init__(self):
        self.copies = 0

    def add_copy(self) -> None:
        self.copies += 1

    def get_copies(self) -> int:
        return self.copies


class Library:
    """Catalogue that donated movies are added to."""

    def __init__(self):
        self.catalogue: List[Movie] = []

    def get_catalogue(self) -> List[Movie]:
        return self.catalogue

    def donate(self, movie: Movie) -> None:
        if movie not in self.catalogue:
            self.catalogue.append(movie)
        movie.add_copy()

    def contains(self, movie: Movie) -> bool:
        return movie in self.get_catalogue()


class CatalogueMovie:
    """Movie entry built from looked-up IMDB details."""

    def __init__(self, title: str, year: int):
        self.title = title
        self.year = year

    def get_title(self) -> str:
        return self.title

    def get_year(self) -> int:
        return self.year

    def __repr__(self) -> str:
        return f"CatalogueMovie(title={self.title!r}, year={self.year})"


class ImdbLibrary:
    """
    Catalogue keyed by IMDB id.

    Collaborators:
        movie_info: anything with fetch(imdb_id) -> {"title": str, "year": str}
        email_server: anything with send_email(subject, recipients, args)

    Donating looks the movie up through `movie_info`, stores it, and emails
    every member about the new title.
    """

    def __init__(self, movie_info, email_server):
        self.movie_info = movie_info
        self.email_server = email_server
        self.catalogue: Dict[str, CatalogueMovie] = {}

    def find_movie(self, imdb_id: str) -> Optional[CatalogueMovie]:
        return self.catalogue.get(imdb_id)

    def donate(self, imdb_id: str) -> None:
        info = self.movie_info.fetch(imdb_id)
        movie = CatalogueMovie(info["title"], int(info["year"]))
        self.catalogue[imdb_id] = movie
        logger.info("Donated %s: %s (%d)", imdb_id, movie.title, movie.year)
        self.email_server.send_email(
            NEW_MOVIE_SUBJECT,
            ALL_MEMBERS,
            [movie.title, str(movie.year)],
        )
