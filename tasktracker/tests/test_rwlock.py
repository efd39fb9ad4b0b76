"""读写锁测试用例"""

import threading

import pytest

from tasktracker.storage.rwlock import ReadWriteLock


class TestReadWriteLock:
    """测试读写锁"""

    def test_readers_share_lock(self):
        """测试多个读者可以同时持有读锁"""
        lock = ReadWriteLock()
        barrier = threading.Barrier(2, timeout=2)
        errors = []

        def reader():
            with lock.read_locked():
                try:
                    barrier.wait()
                except threading.BrokenBarrierError as e:
                    errors.append(e)

        threads = [threading.Thread(target=reader) for _ in range(2)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=5)

        assert errors == []

    def test_writer_excludes_readers(self):
        """测试写锁排斥读者"""
        lock = ReadWriteLock()
        acquired = threading.Event()

        def reader():
            with lock.read_locked():
                acquired.set()

        lock.acquire_write()
        t = threading.Thread(target=reader)
        t.start()
        assert not acquired.wait(0.2)

        lock.release_write()
        assert acquired.wait(2)
        t.join(timeout=2)

    def test_writer_waits_for_readers(self):
        """测试写者等待读者释放"""
        lock = ReadWriteLock()
        acquired = threading.Event()

        def writer():
            with lock.write_locked():
                acquired.set()

        lock.acquire_read()
        t = threading.Thread(target=writer)
        t.start()
        assert not acquired.wait(0.2)

        lock.release_read()
        assert acquired.wait(2)
        t.join(timeout=2)

    def test_release_without_acquire(self):
        """测试未持有锁时释放会报错"""
        lock = ReadWriteLock()
        with pytest.raises(RuntimeError):
            lock.release_read()
        with pytest.raises(RuntimeError):
            lock.release_write()
