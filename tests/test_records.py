from book import Book
from member import Member


def test_book_defaults_and_display():
    book = Book(" Dune ", "Herbert ")
    assert book.id == 0
    assert book.title == "Dune"
    assert book.author == "Herbert"

    book.id = 3
    assert str(book) == "3: Dune - Herbert"

def test_member_defaults_and_display():
    member = Member("  Alice")
    assert member.id == 0
    assert member.name == "Alice"

    member.id = 2
    assert str(member) == "2: Alice"

def test_book_equality_compares_all_fields():
    assert Book("Dune", "Herbert", id=1) == Book("Dune", "Herbert", id=1)
    assert Book("Dune", "Herbert", id=1) != Book("Dune", "Herbert", id=2)
    assert Book("Dune", "Herbert", id=1) != Book("Dune", "Someone", id=1)
    assert Book("Dune", "Herbert", id=1) != Member("Dune", id=1)

def test_member_equality():
    assert Member("Alice", id=1) == Member("Alice", id=1)
    assert Member("Alice", id=1) != Member("Bob", id=1)

def test_book_dict_conversion():
    book = Book("1984", "Orwell", id=2)
    assert book.to_dict() == {"id": 2, "title": "1984", "author": "Orwell"}
    assert Book.from_dict({"title": "1984", "author": "Orwell"}).id == 0
    assert Book.from_dict(book.to_dict()) == book

def test_member_dict_conversion():
    assert Member("Bob", id=4).to_dict() == {"id": 4, "name": "Bob"}
    assert Member.from_dict({"name": "Bob"}) == Member("Bob")

def test_repr_is_informative():
    assert repr(Book("Dune", "Herbert", id=1)) == "Book(id=1, title='Dune', author='Herbert')"
    assert repr(Member("Alice")) == "Member(id=0, name='Alice')"
