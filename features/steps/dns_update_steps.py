"""
Step definitions for PorkDyn integration tests.
"""

from behave import given, when, then

from porkdyn.exceptions import ProviderRejected, ValidationError
from porkdyn.models import DnsRecordType
from porkdyn.utils.validators import parse_domain


def _run(context, domain, **addresses):
    request = dict(context.credentials, domain=domain)
    request.update(addresses)
    context.error = None
    try:
        context.result = context.dns_manager.run(request)
    except ValidationError as e:
        context.result = None
        context.error = e


@given("PorkDyn is configured with the mock provider")
def step_configured(context):
    assert context.dns_manager is not None
    assert context.dns_manager.provider is context.provider


@given('the credentials "{apikey}" and "{secretapikey}"')
def step_credentials(context, apikey, secretapikey):
    context.credentials = {"apikey": apikey, "secretapikey": secretapikey}


@given('there is no {record_type} record for "{domain}"')
def step_no_record(context, record_type, domain):
    assert (domain, DnsRecordType(record_type)) not in context.provider.records


@given('the {record_type} record for "{domain}" is "{value}"')
def step_seed_record(context, record_type, domain, value):
    context.provider.seed(domain, DnsRecordType(record_type), value)


@given("the provider rejects {record_type} requests")
def step_provider_rejects(context, record_type):
    context.provider.fail_on(
        DnsRecordType(record_type), ProviderRejected("Invalid API key.", status_code=400)
    )


@when('I request an update of "{domain}" with ip "{ip}" and ipv6 "{ipv6}"')
def step_update_dual_stack(context, domain, ip, ipv6):
    _run(context, domain, ip=ip, ipv6=ipv6)


@when('I request an update of "{domain}" with ip "{ip}"')
def step_update_ipv4(context, domain, ip):
    _run(context, domain, ip=ip)


@when('I request an update of "{domain}" with ipv6 "{ipv6}"')
def step_update_ipv6(context, domain, ipv6):
    _run(context, domain, ipv6=ipv6)


@then('the {record_type} record outcome is "{kind}"')
def step_outcome(context, record_type, kind):
    assert context.error is None, f"Request failed: {context.error}"
    outcome = context.result.outcomes[DnsRecordType(record_type)]
    assert outcome.kind.value == kind, f"Expected {kind}, got {outcome.kind.value}"


@then('the response status is "{status}"')
def step_status(context, status):
    response = context.result.to_response()
    assert response["status"] == status, f"Expected {status}, got {response}"


@then('the response message contains "{text}"')
def step_message(context, text):
    assert text in context.result.message, context.result.message


@then('the {record_type} record for "{domain}" is "{value}"')
def step_record_value(context, record_type, domain, value):
    record = context.provider.fetch(parse_domain(domain), DnsRecordType(record_type))
    assert record is not None and record.value == value, f"Record is {record}"


@then("only {count:d} provider call was made")
def step_call_count(context, count):
    assert len(context.provider.calls) == count, context.provider.calls


@then("no provider call was made")
def step_no_calls(context):
    assert context.provider.calls == [], context.provider.calls


@then('the request is rejected with "{error_name}"')
def step_rejected(context, error_name):
    assert context.error is not None, "Request was not rejected"
    assert type(context.error).__name__ == error_name, repr(context.error)
