""" Normalization of identifiers and entity prefixes

Identifiers of SBML objects may contain only letters, digits and underscores and may
not begin with a digit. :obj:`IdNormalizer` maps arbitrary identifiers onto this
character set. :obj:`CanonicalId` adds the entity prefixes of the BiGG namespace,
`M_` (metabolites), `G_` (gene products) and `R_` (reactions).

:Author: Jonathan Karr <karr@mssm.edu>
:Date: 2026-10-19
:Copyright: 2026, Karr Lab
:License: MIT
"""

from gem_json.diagnostics import Diagnostics
import re
import string

ALLOWED_CHARS = frozenset(string.ascii_letters + string.digits + '_')
FIRST_CHARS = frozenset(string.ascii_letters + '_')


class IdNormalizer(object):
    """ Normalize identifiers into the SBML identifier character set

    Attributes:
        diagnostics (:obj:`Diagnostics`): sink for identifier corrections
    """

    def __init__(self, diagnostics=None):
        """
        Args:
            diagnostics (:obj:`Diagnostics`, optional): sink for identifier corrections
        """
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()

    def normalize(self, raw_id):
        """ Normalize an identifier

        * Prepend `_` if the identifier does not begin with a letter or `_`
        * Replace each character other than letters, digits and `_` with `_`,
          except for a final such character, which is dropped

        Args:
            raw_id (:obj:`str`): identifier

        Returns:
            :obj:`str`: normalized identifier

        Raises:
            :obj:`ValueError`: if `raw_id` is empty
        """
        if not raw_id:
            raise ValueError('Identifier must be a non-empty string')

        chars = []
        if raw_id[0] not in FIRST_CHARS:
            chars.append('_')
        i_last = len(raw_id) - 1
        for i_char, char in enumerate(raw_id):
            if char in ALLOWED_CHARS:
                chars.append(char)
            elif i_char < i_last:
                chars.append('_')
        new_id = ''.join(chars)

        if new_id != raw_id:
            self.diagnostics.debug('CHANGED_ID', old=raw_id, new=new_id)
        return new_id

    __call__ = normalize


class CanonicalId(object):
    """ Identifier with an optional entity prefix

    Attributes:
        prefix (:obj:`str`): entity prefix (e.g. `M`), or :obj:`None`
        abbreviation (:obj:`str`): identifier without the prefix
    """

    PREFIXES = ('M', 'G', 'R')
    # :obj:`tuple` of :obj:`str`: default recognized entity prefixes

    def __init__(self, id, prefixes=PREFIXES):
        """
        Args:
            id (:obj:`str`): normalized identifier, optionally prefixed
            prefixes (:obj:`tuple` of :obj:`str`, optional): recognized entity prefixes
        """
        self.prefix = None
        self.abbreviation = id
        if len(id) > 2 and id[1] == '_' and id[0] in prefixes:
            self.prefix = id[0]
            self.abbreviation = id[2:]

    def is_set_prefix(self):
        """ Determine if the identifier has an entity prefix

        Returns:
            :obj:`bool`: :obj:`True` if the identifier has a prefix
        """
        return self.prefix is not None

    def __str__(self):
        if self.prefix:
            return self.prefix + '_' + self.abbreviation
        return self.abbreviation


class PrefixExemption(object):
    """ Predicate which determines if an identifier is exempt from entity prefixes

    Attributes:
        pattern (:obj:`re.Pattern`): pattern which matches exempt identifiers anywhere in the identifier
    """

    def __init__(self, pattern='biomass', flags=re.IGNORECASE):
        """
        Args:
            pattern (:obj:`str`, optional): regular expression
            flags (:obj:`int`, optional): regular expression flags
        """
        self.pattern = re.compile(pattern, flags)

    def __call__(self, id):
        """ Determine if an identifier is exempt from entity prefixes

        Args:
            id (:obj:`str`): identifier

        Returns:
            :obj:`bool`: :obj:`True` if `id` is exempt
        """
        return self.pattern.search(id) is not None


def never_exempt(id):
    """ Prefix exemption which exempts no identifiers """
    return False


def gen_canonical_id(normalizer, raw_id, prefix, is_exempt=never_exempt, replace_prefix=False,
                     prefixes=CanonicalId.PREFIXES):
    """ Normalize an identifier and add an entity prefix

    Args:
        normalizer (:obj:`IdNormalizer`): normalizer
        raw_id (:obj:`str`): identifier
        prefix (:obj:`str`): entity prefix
        is_exempt (:obj:`callable`, optional): predicate which determines if the normalized
            identifier is exempt from the prefix
        replace_prefix (:obj:`bool`, optional): if :obj:`True`, replace an existing entity prefix
            rather than keeping it
        prefixes (:obj:`tuple` of :obj:`str`, optional): recognized entity prefixes

    Returns:
        :obj:`str`: canonical identifier

    Raises:
        :obj:`ValueError`: if `raw_id` is empty
    """
    canonical_id = CanonicalId(normalizer.normalize(raw_id), prefixes=prefixes)
    if (replace_prefix or not canonical_id.is_set_prefix()) and not is_exempt(str(canonical_id)):
        canonical_id.prefix = prefix
    return str(canonical_id)
