from typing import Optional

from book import Book
from member import Member
from repository import BookRepository, MemberRepository


class Library:
    """Single entry point for managing books and members.

    The repositories are injected by the caller, who also owns their lifetime.
    Every operation forwards straight to the matching repository.
    """

    def __init__(self, book_repository: BookRepository, member_repository: MemberRepository) -> None:
        self.book_repository = book_repository
        self.member_repository = member_repository

    # ------------------------- Books ------------------------- #
    def add_book(self, title: str, author: str) -> Book:
        book = Book(title=title, author=author)
        self.book_repository.add(book)
        return book

    def remove_book(self, book: Book) -> None:
        self.book_repository.remove(book)

    def get_book_by_id(self, id: int) -> Optional[Book]:
        return self.book_repository.get_by_id(id)

    # ------------------------- Members ------------------------- #
    def add_member(self, name: str) -> Member:
        member = Member(name=name)
        self.member_repository.add(member)
        return member

    def remove_member(self, member: Member) -> None:
        self.member_repository.remove(member)

    def get_member_by_id(self, id: int) -> Optional[Member]:
        return self.member_repository.get_by_id(id)
