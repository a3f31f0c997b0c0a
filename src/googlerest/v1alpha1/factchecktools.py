"""
Fact Check Tools API

Search fact-checked claims and manage the ClaimReview markup
published for a site.
Docs: https://developers.google.com/fact-check/tools/api/
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar

from ..client import GoogleRestClient
from ..common import Empty
from ..resources import GoogleRestResourceBase
from ..wire import DATETIME, ListOf

class FactCheckTools(GoogleRestClient):
    DEFAULT_BASE_URL = "https://factchecktools.googleapis.com/"

    def claimsSearch(self, languageCode: str|None = None, maxAgeDays: int|None = None,
                     offset: int|None = None, pageSize: int|None = None,
                     pageToken: str|None = None, query: str|None = None,
                     reviewPublisherSiteFilter: str|None = None) -> FactCheckedClaimSearchResponse:
        """
        Search through fact-checked claims.
        query is required unless reviewPublisherSiteFilter is given.
        offset is only used when pageToken isn't.
        """
        return self._call("v1alpha1/claims:search", "GET", FactCheckedClaimSearchResponse,
                          languageCode=languageCode, maxAgeDays=maxAgeDays, offset=offset,
                          pageSize=pageSize, pageToken=pageToken, query=query,
                          reviewPublisherSiteFilter=reviewPublisherSiteFilter)

    def pagesCreate(self, req: ClaimReviewMarkupPage) -> ClaimReviewMarkupPage:
        """Create ClaimReview markup on a page."""
        return self._call("v1alpha1/pages", "POST", ClaimReviewMarkupPage, body=req)

    def pagesDelete(self, name: str) -> Empty:
        """
        Delete all ClaimReview markup on a page.
        param: name: pages/{page_id}
        """
        return self._call("v1alpha1/{+name}", "DELETE", Empty, name=name)

    def pagesGet(self, name: str) -> ClaimReviewMarkupPage:
        return self._call("v1alpha1/{+name}", "GET", ClaimReviewMarkupPage, name=name)

    def pagesList(self, offset: int|None = None, organization: str|None = None,
                  pageSize: int|None = None, pageToken: str|None = None,
                  url: str|None = None) -> ListClaimReviewMarkupPagesResponse:
        """
        List the ClaimReview markup pages for a specific URL or for an organization.
        """
        return self._call("v1alpha1/pages", "GET", ListClaimReviewMarkupPagesResponse,
                          offset=offset, organization=organization, pageSize=pageSize,
                          pageToken=pageToken, url=url)

    def pagesUpdate(self, name: str, req: ClaimReviewMarkupPage) -> ClaimReviewMarkupPage:
        """
        This is a full update, markup missing from req is removed.
        To keep the existing markup pagesGet() first, modify and send the whole thing back.
        """
        return self._call("v1alpha1/{+name}", "PUT", ClaimReviewMarkupPage, body=req, name=name)

@dataclass
class Claim(GoogleRestResourceBase):
    """
    Information about the claim.
    """
    claimant: str|None = field(default=None)
    claimDate: datetime|None = field(default=None)
    claimReview: list[ClaimReview]|None = field(default=None)
    text: str|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'claimDate': DATETIME,
        'claimReview': ListOf('ClaimReview'),
    }

@dataclass
class ClaimAuthor(GoogleRestResourceBase):
    """
    Information about the claim author.
    """
    imageUrl: str|None = field(default=None)
    jobTitle: str|None = field(default=None)
    name: str|None = field(default=None)
    sameAs: str|None = field(default=None)

@dataclass
class ClaimRating(GoogleRestResourceBase):
    """
    Information about the claim rating.  The numeric ratings are on a
    scale where worstRating <= ratingValue <= bestRating.
    """
    bestRating: int|None = field(default=None)
    imageUrl: str|None = field(default=None)
    ratingExplanation: str|None = field(default=None)
    ratingValue: int|None = field(default=None)
    textualRating: str|None = field(default=None)
    worstRating: int|None = field(default=None)

@dataclass
class ClaimReview(GoogleRestResourceBase):
    languageCode: str|None = field(default=None)
    publisher: Publisher|None = field(default=None)
    reviewDate: datetime|None = field(default=None)
    textualRating: str|None = field(default=None)
    title: str|None = field(default=None)
    url: str|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'publisher': 'Publisher',
        'reviewDate': DATETIME,
    }

@dataclass
class ClaimReviewAuthor(GoogleRestResourceBase):
    imageUrl: str|None = field(default=None)
    name: str|None = field(default=None)

@dataclass
class ClaimReviewMarkup(GoogleRestResourceBase):
    """
    Fields for an individual ClaimReview element.
    claimDate is free text (ideally ISO 8601) so stays a string.
    """
    claimAppearances: list[str]|None = field(default=None)
    claimAuthor: ClaimAuthor|None = field(default=None)
    claimDate: str|None = field(default=None)
    claimFirstAppearance: str|None = field(default=None)
    claimLocation: str|None = field(default=None)
    claimReviewed: str|None = field(default=None)
    rating: ClaimRating|None = field(default=None)
    url: str|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'claimAuthor': 'ClaimAuthor',
        'rating': 'ClaimRating',
    }

@dataclass
class ClaimReviewMarkupPage(GoogleRestResourceBase):
    """
    Holds one or more instances of ClaimReview markup for a webpage.
    name is output only, except for pagesUpdate.
    """
    claimReviewAuthor: ClaimReviewAuthor|None = field(default=None)
    claimReviewMarkups: list[ClaimReviewMarkup]|None = field(default=None)
    name: str|None = field(default=None)
    pageUrl: str|None = field(default=None)
    publishDate: str|None = field(default=None)
    versionId: str|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'claimReviewAuthor': 'ClaimReviewAuthor',
        'claimReviewMarkups': ListOf('ClaimReviewMarkup'),
    }

@dataclass
class FactCheckedClaimSearchResponse(GoogleRestResourceBase):
    claims: list[Claim]|None = field(default=None)
    nextPageToken: str|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'claims': ListOf('Claim'),
    }

@dataclass
class ListClaimReviewMarkupPagesResponse(GoogleRestResourceBase):
    claimReviewMarkupPages: list[ClaimReviewMarkupPage]|None = field(default=None)
    nextPageToken: str|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'claimReviewMarkupPages': ListOf('ClaimReviewMarkupPage'),
    }

@dataclass
class Publisher(GoogleRestResourceBase):
    """
    Information about the publisher.
    """
    name: str|None = field(default=None)
    site: str|None = field(default=None)
