from unittest import mock

from katas.entities.library import ImdbLibrary, Library, Movie


class StubMovieInfo:
    def __init__(self, title, year):
        self.title = title
        self.year = year

    def fetch(self, imdb_id):
        return {"title": self.title, "year": str(self.year)}


def test_donate_movie():
    library = Library()
    movie = Movie()
    library.donate(movie)
    assert library.contains(movie)
    assert movie.get_copies() == 1


def test_donating_twice_adds_a_copy_not_an_entry():
    library = Library()
    movie = Movie()
    library.donate(movie)
    library.donate(movie)
    assert len(library.get_catalogue()) == 1
    assert movie.get_copies() == 2


def test_undonated_movie_not_in_catalogue():
    assert not Library().contains(Movie())


def test_donated_movie_added_with_imdb_info():
    email_server = mock.Mock()
    library = ImdbLibrary(StubMovieInfo("The Abyss", 1989), email_server)
    library.donate("tt12345")
    movie = library.find_movie("tt12345")
    assert movie.get_title() == "The Abyss"
    assert movie.get_year() == 1989


def test_members_emailed_about_donated_title():
    email_server = mock.Mock()
    ImdbLibrary(StubMovieInfo("The Abyss", 1989), email_server).donate("")
    email_server.send_email.assert_called_once_with(
        "New Movie",
        "All members",
        ["The Abyss", "1989"],
    )


def test_find_unknown_movie():
    library = ImdbLibrary(StubMovieInfo("x", 2000), mock.Mock())
    assert library.find_movie("tt0") is None
