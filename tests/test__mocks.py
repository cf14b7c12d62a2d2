import pytest
from pytest import mark

import nickserv
from .mocks import MockHost, Mock


## Host.


@mark.meta
def test_mock_host_send():
    host = MockHost()
    assert host.send('PRIVMSG', 'NickServ IDENTIFY hunter2')
    assert host.received('PRIVMSG', 'NickServ IDENTIFY hunter2')
    assert not host.received('PRIVMSG', 'NickServ IDENTIFY hunter2')


@mark.meta
def test_mock_host_refuse():
    host = MockHost()
    host.refuse = True
    assert host.send('PRIVMSG', 'NickServ IDENTIFY hunter2') is False
    assert not host.received('PRIVMSG', 'NickServ IDENTIFY hunter2')


@mark.meta
def test_mock_host_raise_on_send():
    host = MockHost()
    host.raise_on_send = nickserv.SendFailed('connection reset')
    with pytest.raises(nickserv.SendFailed):
        host.send('PRIVMSG', 'NickServ IDENTIFY hunter2')


@mark.meta
def test_mock_host_records_away_state():
    host = MockHost()
    host.send('PRIVMSG', 'hi')
    host.auto_discard_away = False
    host.send('PRIVMSG', 'hi')
    assert host.away_during_send == [True, False]


@mark.meta
def test_mock_host_primitives():
    host = MockHost()
    host.secrets['WiZ'] = {'secret': 'hunter2'}
    host.prompt_answer = 'swordfish'

    assert host.query_secret('irc.mock.local', 6667, 'WiZ') == {'secret': 'hunter2'}
    assert host.query_secret('irc.mock.local', 6667, 'jilles') is None
    assert host.queries == [('irc.mock.local', 6667, 'WiZ'), ('irc.mock.local', 6667, 'jilles')]

    assert host.prompt('Password: ') == 'swordfish'
    assert host.prompts == ['Password: ']

    host.error('oops')
    assert host.errors == ['oops']


## Events.


@mark.meta
def test_mock_host_handlers():
    host = MockHost()
    handler = Mock()

    host.add_handler('connect', handler)
    assert host.handler_count('connect') == 1
    assert host.handler_count() == 1

    host.connect()
    handler.assert_called_once_with('MockNet', 'TestcaseRunner')

    host.remove_handler('connect', handler)
    assert host.handler_count() == 0


@mark.meta
def test_mock_host_notice():
    host = MockHost()
    handler = Mock()
    host.add_handler('notice', handler)

    host.notice('NickServ!n@h', 'please identify')
    message = handler.call_args[0][0]
    assert isinstance(message, nickserv.Message)
    assert message.source == 'NickServ!n@h'
    assert message.command == 'NOTICE'
    assert message.target == 'TestcaseRunner'
    assert message.contents == 'please identify'


@mark.meta
def test_mock_host_change_nick():
    host = MockHost()
    handler = Mock()
    host.add_handler('nick_change', handler)

    host.change_nick('WiZ')
    assert host.nickname == 'WiZ'
    handler.assert_called_once_with('WiZ', 'TestcaseRunner')
