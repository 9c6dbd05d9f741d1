""" Helpers for building flux balance models with libSBML

:Author: Jonathan Karr <karr@mssm.edu>
:Author: Arthur Goldberg <Arthur.Goldberg@mssm.edu>
:Date: 2026-10-19
:Copyright: 2026, Karr Lab
:License: MIT
"""

from gem_json.core import GemJsonWarning
import libsbml
import warnings


class LibSbmlError(Exception):
    ''' Exception raised when libSBML rejects a call or a document '''


class LibSbmlInterface(object):
    ''' Methods which build the parts of SBML documents that models are exported to

    All libSBML calls go through :obj:`call_libsbml`, which turns the return codes that libSBML
    uses to signal failures into :obj:`LibSbmlError` exceptions.
    '''

    @classmethod
    def create_doc(cls, level=3, version=1, packages=None):
        """ Create an SBML document which declares the namespaces of one or more packages

        Packages are marked as not required because models which use them can still be
        interpreted without their information.

        Args:
            level (:obj:`int`, optional): SBML level
            version (:obj:`int`, optional): SBML version
            packages (:obj:`dict` of :obj:`str`: :obj:`int`, optional): version of each package

        Returns:
            :obj:`libsbml.SBMLDocument`: SBML document
        """
        packages = packages or {}

        sbml_ns = cls.call_libsbml(libsbml.SBMLNamespaces, level, version)
        for package_id, package_version in packages.items():
            cls.call_libsbml(sbml_ns.addPackageNamespace, package_id, package_version)

        sbml_doc = cls.call_libsbml(libsbml.SBMLDocument, sbml_ns)
        for package_id in packages:
            cls.call_libsbml(sbml_doc.setPackageRequired, package_id, False)
        return sbml_doc

    @classmethod
    def init_model(cls, model, sbml_doc, packages=None):
        """ Add the SBML model of a model to a document

        Args:
            model (:obj:`gem_json.core.Model`): model
            sbml_doc (:obj:`libsbml.SBMLDocument`): SBML document
            packages (:obj:`dict` of :obj:`str`: :obj:`int`, optional): version of each package

        Returns:
            :obj:`libsbml.Model`: SBML model
        """
        sbml_model = cls.call_libsbml(sbml_doc.createModel)
        cls.call_libsbml(sbml_model.setIdAttribute, model.id)
        if model.name:
            cls.call_libsbml(sbml_model.setName, model.name)

        # flux bounds must be parameters and gene product associations must reference gene products
        if 'fbc' in (packages or {}):
            sbml_fbc = cls.call_libsbml(sbml_model.getPlugin, 'fbc')
            cls.call_libsbml(sbml_fbc.setStrict, True)

        return sbml_model

    @classmethod
    def create_unit_definition(cls, unit_def, sbml_model):
        """ Add a unit definition, such as the units of fluxes, to an SBML model

        Args:
            unit_def (:obj:`gem_json.core.UnitDefinition`): unit definition
            sbml_model (:obj:`libsbml.Model`): SBML model

        Returns:
            :obj:`libsbml.UnitDefinition`: SBML unit definition
        """
        sbml_unit_def = cls.call_libsbml(sbml_model.createUnitDefinition)
        cls.call_libsbml(sbml_unit_def.setIdAttribute, unit_def.id)
        if unit_def.name:
            cls.call_libsbml(sbml_unit_def.setName, unit_def.name)
        for unit in unit_def.units:
            cls.create_base_unit(sbml_unit_def, unit.kind, exponent=unit.exponent, scale=unit.scale,
                                 multiplier=unit.multiplier)
        return sbml_unit_def

    @classmethod
    def create_base_unit(cls, sbml_unit_def, kind, exponent=1, scale=0, multiplier=1.0):
        """ Add a factor to an SBML unit definition

        Args:
            sbml_unit_def (:obj:`libsbml.UnitDefinition`): SBML unit definition
            kind (:obj:`str`): name of an SBML base unit such as `mole`, `gram` or `second`
            exponent (:obj:`int`, optional): exponent
            scale (:obj:`int`, optional): power of ten which scales the base unit
            multiplier (:obj:`float`, optional): multiplier

        Returns:
            :obj:`libsbml.Unit`: SBML unit

        Raises:
            :obj:`AttributeError`: if `kind` is not an SBML base unit
        """
        kind_code = getattr(libsbml, 'UNIT_KIND_' + kind.upper())

        sbml_unit = cls.call_libsbml(sbml_unit_def.createUnit)
        cls.call_libsbml(sbml_unit.setKind, kind_code)
        cls.call_libsbml(sbml_unit.setExponent, float(exponent))
        cls.call_libsbml(sbml_unit.setScale, int(scale))
        cls.call_libsbml(sbml_unit.setMultiplier, float(multiplier))
        return sbml_unit

    @classmethod
    def create_parameter(cls, sbml_model, id, value, units, name=None, constant=True):
        """ Add a parameter, such as a flux bound, to an SBML model

        Args:
            sbml_model (:obj:`libsbml.Model`): SBML model
            id (:obj:`str`): id
            value (:obj:`float`): value; not set if :obj:`None`
            units (:obj:`str`): id of the unit definition of the value; not set if :obj:`None`
            name (:obj:`str`, optional): name
            constant (:obj:`bool`, optional): whether the value is constant

        Returns:
            :obj:`libsbml.Parameter`: SBML parameter
        """
        sbml_parameter = cls.call_libsbml(sbml_model.createParameter)
        cls.call_libsbml(sbml_parameter.setIdAttribute, id)
        if name is not None:
            cls.call_libsbml(sbml_parameter.setName, name)
        if value is not None:
            cls.call_libsbml(sbml_parameter.setValue, value)
        if units is not None:
            cls.call_libsbml(sbml_parameter.setUnits, units)
        cls.call_libsbml(sbml_parameter.setConstant, constant)
        return sbml_parameter

    @classmethod
    def verify_doc(cls, sbml_doc, level=3, version=1):
        """ Check that an SBML document can be encoded in a level and version of SBML and that
        it is valid and consistent

        The checks stop at the first one which finds errors. Warnings are issued as
        :obj:`GemJsonWarning`.

        Args:
            sbml_doc (:obj:`libsbml.SBMLDocument`): SBML document
            level (:obj:`int`, optional): SBML level
            version (:obj:`int`, optional): SBML version

        Raises:
            :obj:`LibSbmlError`: if the document fails a check
        """
        checks = [
            ('compatible with SBML L{}V{}'.format(level, version),
             getattr(sbml_doc, 'checkL{}v{}Compatibility'.format(level, version))),
            ('valid SBML', sbml_doc.validateSBML),
            ('internally consistent', sbml_doc.checkInternalConsistency),
            ('consistent', sbml_doc.checkConsistency),
        ]
        for description, check in checks:
            cls.call_libsbml(check, returns_int=True)
            errors, warns = cls.get_errors_warnings(sbml_doc)
            if warns:
                warnings.warn('Document is not fully {}:{}'.format(description, ''.join(warns)), GemJsonWarning)
            if errors:
                raise LibSbmlError('Document is not {}:{}'.format(description, ''.join(errors)))

    @classmethod
    def get_errors_warnings(cls, sbml_doc):
        """ Get the messages of the errors and warnings logged by an SBML document

        Args:
            sbml_doc (:obj:`libsbml.SBMLDocument`): SBML document

        Returns:
            :obj:`tuple`:

                * :obj:`list` of :obj:`str`: errors
                * :obj:`list` of :obj:`str`: warnings and informational messages
        """
        errors = []
        warns = []
        for i_error in range(cls.call_libsbml(sbml_doc.getNumErrors, returns_int=True)):
            error = cls.call_libsbml(sbml_doc.getError, i_error)
            msg = '\n  {}: {}'.format(error.getSeverityAsString(), error.getMessage().strip())
            if error.getSeverity() in (libsbml.LIBSBML_SEV_INFO, libsbml.LIBSBML_SEV_WARNING):
                warns.append(msg)
            else:
                errors.append(msg)
        return (errors, warns)

    @classmethod
    def call_libsbml(cls, method, *args, returns_int=False):
        """ Call a libSBML function or method and raise an exception if it fails

        libSBML signals most failures with integer return codes or by returning :obj:`None`.
        Methods which return integers as data, such as counts, must be called with `returns_int`
        so that their values are not mistaken for return codes.

        Args:
            method (:obj:`callable`): libSBML function, method or class
            args (:obj:`list`): arguments
            returns_int (:obj:`bool`, optional): if :obj:`True`, `method` returns an integer as data

        Returns:
            :obj:`object`: value returned by `method`

        Raises:
            :obj:`LibSbmlError`: if `method` raises an exception, returns :obj:`None` or returns an error code
        """
        call = '{}({})'.format(getattr(method, '__name__', method), ', '.join(str(arg) for arg in args))
        try:
            result = method(*args)
        except Exception as error:
            raise LibSbmlError("libSBML call {} failed: {}".format(call, error)) from error

        if result is None:
            raise LibSbmlError('libSBML call {} returned None'.format(call))

        if type(result) is int and not returns_int and result != libsbml.LIBSBML_OPERATION_SUCCESS:
            code = libsbml.OperationReturnValue_toString(result)
            if code is None:
                warnings.warn(("libSBML call {} returned {}, which is not a return code; "
                               "call it with returns_int=True").format(call, result), GemJsonWarning)
            else:
                raise LibSbmlError('libSBML call {} returned {}'.format(call, code))

        return result
